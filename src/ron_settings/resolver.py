"""Settings file location

Candidates are probed in priority order and the first existing one wins:

1. the file named by ``{APPLICATION}_CONFIG_PATH``
2. ``settings.ron`` in the current working directory
3. ``settings.ron`` in the platform configuration directory

Platform configuration directories for ``("com", "Foo Corp", "Bar App")``:

    Linux:   ~/.config/barapp
    Windows: C:\\Users\\Alice\\AppData\\Roaming\\Foo Corp\\Bar App
    macOS:   ~/Library/Application Support/com.Foo-Corp.Bar-App
"""

import logging
import os
import re
import sys
from pathlib import Path
from typing import List

from platformdirs import user_config_dir

from .errors import NotFoundError

logger = logging.getLogger(__name__)

FILE_NAME = "settings.ron"

_WHITESPACE_RE = re.compile(r"\s+")


def config_env_var(application: str) -> str:
    """Name of the environment variable overriding the settings path"""
    return f"{application.upper()}_CONFIG_PATH"


def config_dir(qualifier: str, organization: str, application: str) -> Path:
    """Platform configuration directory for an application"""
    if sys.platform == "win32":
        return Path(user_config_dir(application, organization, roaming=True))
    if sys.platform == "darwin":
        bundle_id = ".".join([qualifier, organization, application])
        return Path(user_config_dir(_WHITESPACE_RE.sub("-", bundle_id.strip()), False))
    name = _WHITESPACE_RE.sub("", application).lower()
    return Path(user_config_dir(name, False))


def candidate_paths(qualifier: str, organization: str, application: str) -> List[Path]:
    """Settings file candidates in priority order"""
    candidates: List[Path] = []

    env_path = os.environ.get(config_env_var(application))
    if env_path:
        candidates.append(Path(env_path))

    try:
        candidates.append(Path(os.getcwd()) / FILE_NAME)
    except OSError:
        # Working directory was removed underneath us
        pass

    candidates.append(config_dir(qualifier, organization, application) / FILE_NAME)
    return candidates


def resolve_path(qualifier: str, organization: str, application: str) -> Path:
    """
    Find the settings file for an application

    Args:
        qualifier: Reverse domain qualifier, e.g. "com"
        organization: Organization name
        application: Application name

    Returns:
        First candidate path that exists

    Raises:
        NotFoundError: If no candidate exists
    """
    candidates = candidate_paths(qualifier, organization, application)
    for path in candidates:
        if path.exists():
            logger.debug("Resolved settings path %s", path)
            return path
    raise NotFoundError(candidates)
