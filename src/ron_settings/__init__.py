"""Load and save application settings as RON files"""

import logging

from .errors import (
    SettingsError,
    OpenError,
    DeserializeError,
    SerializeError,
    NotFoundError,
)
from .resolver import FILE_NAME, candidate_paths, config_dir, config_env_var, resolve_path
from .ron import PrettyConfig
from .settings import Settings
from .storage import read_value, write_value

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "PrettyConfig",
    "SettingsError",
    "OpenError",
    "DeserializeError",
    "SerializeError",
    "NotFoundError",
    "FILE_NAME",
    "candidate_paths",
    "config_dir",
    "config_env_var",
    "resolve_path",
    "read_value",
    "write_value",
]
