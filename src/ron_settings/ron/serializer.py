"""RON pretty printer

Walks a Python value and renders it as RON. Pydantic models and dataclasses
become named structs, dicts become maps, lists and sets become sequences and
tuples stay tuples. Leaves RON has no syntax for (enums, paths, datetimes,
UUIDs, ...) go through pydantic's JSON-compatible conversion first.
"""

import dataclasses
import math
import re
from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Set, Tuple

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from .errors import RonEncodeError

_GENERIC_SUFFIX_RE = re.compile(r"\[.*$")


@dataclass
class PrettyConfig:
    """Layout options for pretty RON output"""
    indentor: str = "    "
    new_line: str = "\n"
    struct_names: bool = True
    # Print tuple members on their own lines like sequence items
    separate_tuple_members: bool = False
    # Nesting depth after which values are printed on a single line
    depth_limit: Optional[int] = None


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "." not in text and "e" not in text:
        text += ".0"
    return text


def _format_str(value: str) -> str:
    out = ['"']
    for char in value:
        if char == "\\":
            out.append("\\\\")
        elif char == '"':
            out.append('\\"')
        elif char == "\n":
            out.append("\\n")
        elif char == "\r":
            out.append("\\r")
        elif char == "\t":
            out.append("\\t")
        elif char == "\0":
            out.append("\\0")
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append("\\u{%x}" % ord(char))
        else:
            out.append(char)
    out.append('"')
    return "".join(out)


def _struct_name(value: Any) -> str:
    return _GENERIC_SUFFIX_RE.sub("", type(value).__name__)


def _struct_fields(value: Any) -> Optional[List[Tuple[str, Any]]]:
    """Declared fields of a model or dataclass instance, else None"""
    if isinstance(value, BaseModel):
        return [
            (info.alias or name, getattr(value, name))
            for name, info in type(value).model_fields.items()
        ]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [
            (f.name, getattr(value, f.name))
            for f in dataclasses.fields(value)
            if f.init
        ]
    return None


class _Writer:
    def __init__(self, pretty: Optional[PrettyConfig]):
        self.pretty = pretty
        self._active: Set[int] = set()

    def write(self, value: Any, depth: int = 0, where: str = "") -> str:
        if value is None:
            return "None"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(int(value))
        if isinstance(value, float):
            return _format_float(value)
        if isinstance(value, str):
            return _format_str(value)

        fields = _struct_fields(value)
        if fields is not None:
            with self._visiting(value, where):
                return self.struct(_struct_name(value), fields, depth, where)
        if isinstance(value, tuple):
            with self._visiting(value, where):
                if hasattr(value, "_fields"):
                    return self.tuple_(value, depth, where, name=_struct_name(value))
                return self.tuple_(value, depth, where)
        if isinstance(value, Mapping):
            with self._visiting(value, where):
                return self.map_(value, depth, where)
        if isinstance(value, (list, set, frozenset)):
            with self._visiting(value, where):
                items = list(value)
                if isinstance(value, (set, frozenset)):
                    try:
                        items = sorted(items)
                    except TypeError:
                        pass
                return self.seq(items, depth, where)

        try:
            converted = to_jsonable_python(value)
        except PydanticSerializationError as e:
            raise RonEncodeError(
                f"cannot represent {type(value).__name__} in RON", where or None
            ) from e
        return self.write(converted, depth, where)

    @contextmanager
    def _visiting(self, value: Any, where: str) -> Iterator[None]:
        if id(value) in self._active:
            raise RonEncodeError("circular reference", where or None)
        self._active.add(id(value))
        try:
            yield
        finally:
            self._active.discard(id(value))

    # Layout --------------------------------------------------------------

    def _multiline(self, depth: int) -> bool:
        if self.pretty is None:
            return False
        limit = self.pretty.depth_limit
        return limit is None or depth < limit

    def _block(self, open_: str, close: str, entries: List[str], depth: int) -> str:
        if not entries:
            return open_ + close
        if not self._multiline(depth):
            sep = "," if self.pretty is None else ", "
            return open_ + sep.join(entries) + close
        nl = self.pretty.new_line
        inner = self.pretty.indentor * (depth + 1)
        outer = self.pretty.indentor * depth
        body = "".join(f"{inner}{entry},{nl}" for entry in entries)
        return f"{open_}{nl}{body}{outer}{close}"

    def _colon(self) -> str:
        return ":" if self.pretty is None else ": "

    def struct(self, name: str, fields: List[Tuple[str, Any]], depth: int, where: str) -> str:
        entries = [
            f"{key}{self._colon()}{self.write(item, depth + 1, _join(where, key))}"
            for key, item in fields
        ]
        prefix = name if self.pretty is not None and self.pretty.struct_names else ""
        return self._block(prefix + "(", ")", entries, depth)

    def tuple_(self, value: tuple, depth: int, where: str, name: str = "") -> str:
        entries = [
            self.write(item, depth + 1, f"{where}[{i}]") for i, item in enumerate(value)
        ]
        prefix = name if self.pretty is not None and self.pretty.struct_names else ""
        if not entries and not prefix:
            # () reads back as unit
            return "[]"
        if self.pretty is not None and self.pretty.separate_tuple_members:
            return self._block(prefix + "(", ")", entries, depth)
        sep = "," if self.pretty is None else ", "
        if len(entries) == 1:
            # (x,) and Name(x,) keep a one element tuple distinct from a newtype
            return f"{prefix}({entries[0]},)"
        return prefix + "(" + sep.join(entries) + ")"

    def map_(self, value: Mapping, depth: int, where: str) -> str:
        entries = []
        for key, item in value.items():
            key_text = self.write(key, depth + 1, where)
            item_text = self.write(item, depth + 1, _join(where, str(key)))
            entries.append(f"{key_text}{self._colon()}{item_text}")
        return self._block("{", "}", entries, depth)

    def seq(self, items: List[Any], depth: int, where: str) -> str:
        entries = [
            self.write(item, depth + 1, f"{where}[{i}]") for i, item in enumerate(items)
        ]
        return self._block("[", "]", entries, depth)


def _join(where: str, key: str) -> str:
    return f"{where}.{key}" if where else key


def dumps(value: Any, pretty: Optional[PrettyConfig] = None) -> str:
    """Render a value as RON

    Args:
        value: Value to render
        pretty: Layout options; compact single-line output without struct
            names when omitted

    Raises:
        RonEncodeError: if part of the value has no RON representation
    """
    return _Writer(pretty).write(value)
