"""Settings errors

Every failure in this package is raised as one of the four kinds below. The
lower-level cause (``OSError``, a RON syntax error, a pydantic validation
error, ...) is chained as ``__cause__``.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple


class SettingsError(Exception):
    """Base class for settings errors"""
    pass


class OpenError(SettingsError):
    """Settings file could not be opened or created"""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Could not open settings file {str(path)!r}: {cause}")
        self.path = Path(path)
        self.cause = cause


class DeserializeError(SettingsError):
    """Settings file contents did not parse into the target type"""

    def __init__(self, cause: Exception, position: Optional[Tuple[int, int]] = None):
        message = "Could not deserialize settings file"
        if position is not None:
            message += f" at line {position[0]}, column {position[1]}"
        super().__init__(f"{message}: {cause}")
        self.cause = cause
        self.position = position


class SerializeError(SettingsError):
    """Settings value could not be encoded or written"""

    def __init__(self, cause: Exception):
        super().__init__(f"Could not serialize settings file: {cause}")
        self.cause = cause


class NotFoundError(SettingsError):
    """No candidate settings file exists"""

    def __init__(self, candidates: Sequence[Path] = ()):
        self.candidates: List[Path] = list(candidates)
        message = "Could not find a settings file"
        if self.candidates:
            message += " (looked in: " + ", ".join(str(p) for p in self.candidates) + ")"
        super().__init__(message)
