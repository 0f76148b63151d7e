"""RON (Rusty Object Notation) text codec"""

from .errors import RonError, RonSyntaxError, RonEncodeError
from .parser import loads
from .serializer import PrettyConfig, dumps

__all__ = [
    "RonError",
    "RonSyntaxError",
    "RonEncodeError",
    "PrettyConfig",
    "loads",
    "dumps",
]
