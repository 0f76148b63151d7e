"""RON codec errors"""

from typing import Optional, Tuple


class RonError(Exception):
    """Base error for RON encoding and decoding"""
    pass


class RonSyntaxError(RonError):
    """Malformed RON text, with the 1-based line and column of the problem"""

    def __init__(self, message: str, line: int, column: int):
        super().__init__(f"{line}:{column}: {message}")
        self.message = message
        self.line = line
        self.column = column

    @property
    def position(self) -> Tuple[int, int]:
        return (self.line, self.column)


class RonEncodeError(RonError):
    """Value that has no RON representation"""

    def __init__(self, message: str, path: Optional[str] = None):
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)
        self.path = path
