"""Settings types for testing"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Set, Tuple

from pydantic import BaseModel


@dataclass
class Config:
    foo: str
    bar: int


class Server(BaseModel):
    host: str
    port: int = 8080


class Mode(str, Enum):
    FAST = "fast"
    SAFE = "safe"


class Point(NamedTuple):
    x: int
    y: int


class AppConfig(BaseModel):
    """Nested settings"""
    name: str
    debug: bool = False
    ratio: float = 0.5
    servers: List[Server] = []
    labels: Dict[str, str] = {}
    token: Optional[str] = None
    mode: Mode = Mode.SAFE
    origin: Point = Point(0, 0)
    size: Tuple[int, int] = (1, 1)


@dataclass
class Window:
    width: int = 800
    height: int = 600
    tags: List[str] = field(default_factory=list)


@dataclass
class Empty:
    pass


class Single(NamedTuple):
    x: int


@dataclass
class Shapes:
    """Field shapes whose RON forms are easy to confuse"""
    empty: Tuple[str, ...] = ()
    single: Single = Single(1)
    nested: Optional[Server] = None
    blank: Empty = field(default_factory=Empty)
    by_id: Dict[int, str] = field(default_factory=dict)
    ids: Set[int] = field(default_factory=set)
    big: float = 1e16
    text: str = ""


@dataclass
class Commands:
    """Fields named like the handle's own methods"""
    save: str = "ctrl+s"
    copy: str = "ctrl+c"
