"""RON text parser

Turns a RON document into plain Python data that pydantic can validate:

    Config(name: "x", ports: [1, 2], extra: Some((1, 2)))

becomes ``{"name": "x", "ports": [1, 2], "extra": (1, 2)}``. Struct names are
accepted and dropped, ``Some(x)`` unwraps to ``x``, ``None`` and ``()`` map to
``None``, tuples stay tuples and unit enum variants map to their name.
"""

import re
from typing import Any, Dict, List, NoReturn, Tuple

from .errors import RonSyntaxError

_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_INT_PREFIXED_RE = re.compile(r"[+-]?0(?:x[0-9A-Fa-f_]+|b[01_]+|o[0-7_]+)")
_FLOAT_RE = re.compile(
    r"[+-]?(?:"
    r"\d[\d_]*\.\d[\d_]*(?:[eE][+-]?\d[\d_]*)?"
    r"|\.\d[\d_]*(?:[eE][+-]?\d[\d_]*)?"
    r"|\d[\d_]*(?:\.)?[eE][+-]?\d[\d_]*"
    r"|\d[\d_]*\.(?![\w.])"
    r")"
)
_INT_RE = re.compile(r"[+-]?\d[\d_]*")
_NUMBER_SUFFIX_RE = re.compile(r"(?:i|u)(?:8|16|32|64|128|size)|f(?:32|64)")

_SIMPLE_ESCAPES = {
    '"': '"',
    "'": "'",
    "\\": "\\",
    "/": "/",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
    "b": "\b",
    "f": "\f",
}


class _Parser:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    # Error reporting -----------------------------------------------------

    def error(self, message: str, pos: int = None) -> NoReturn:
        if pos is None:
            pos = self.pos
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        raise RonSyntaxError(message, line, column)

    # Low level scanning --------------------------------------------------

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_ws(self) -> None:
        text = self.text
        while self.pos < len(text):
            char = text[self.pos]
            if char.isspace():
                self.pos += 1
            elif text.startswith("//", self.pos):
                end = text.find("\n", self.pos)
                self.pos = len(text) if end == -1 else end + 1
            elif text.startswith("/*", self.pos):
                self.skip_block_comment()
            else:
                break

    def skip_block_comment(self) -> None:
        start = self.pos
        depth = 0
        while self.pos < len(self.text):
            if self.text.startswith("/*", self.pos):
                depth += 1
                self.pos += 2
            elif self.text.startswith("*/", self.pos):
                depth -= 1
                self.pos += 2
                if depth == 0:
                    return
            else:
                self.pos += 1
        self.error("unterminated block comment", start)

    def expect(self, char: str) -> None:
        self.skip_ws()
        if self.peek() != char:
            found = repr(self.peek()) if not self.at_end() else "end of input"
            self.error(f"expected {char!r}, found {found}")
        self.pos += 1

    def consume(self, char: str) -> bool:
        self.skip_ws()
        if self.peek() == char:
            self.pos += 1
            return True
        return False

    def match(self, pattern: "re.Pattern") -> str:
        m = pattern.match(self.text, self.pos)
        return m.group(0) if m else ""

    def identifier(self) -> str:
        ident = self.match(_IDENT_RE)
        if not ident:
            self.error("expected identifier")
        self.pos += len(ident)
        return ident

    # Document ------------------------------------------------------------

    def document(self) -> Any:
        self.skip_ws()
        while self.text.startswith("#!", self.pos):
            self.attribute()
            self.skip_ws()
        if self.at_end():
            self.error("unexpected end of input, expected a value")
        value = self.value()
        self.skip_ws()
        if not self.at_end():
            self.error("trailing characters after value")
        return value

    def attribute(self) -> None:
        # #![enable(implicit_some, unwrap_newtypes)]
        self.pos += 2
        self.expect("[")
        self.skip_ws()
        self.identifier()
        self.expect("(")
        while not self.consume(")"):
            self.skip_ws()
            self.identifier()
            if not self.consume(","):
                self.expect(")")
                break
        self.expect("]")

    # Values --------------------------------------------------------------

    def value(self) -> Any:
        self.skip_ws()
        char = self.peek()
        if char == "":
            self.error("unexpected end of input, expected a value")
        if char == "[":
            return self.list_()
        if char == "{":
            return self.map_()
        if char == "(":
            self.pos += 1
            return self.paren_body(named=False)
        if char == '"':
            return self.string()
        if char == "r" and self.peek(1) in ('"', "#"):
            return self.raw_string()
        if char == "'":
            return self.char()
        if char.isdigit() or char in "+-.":
            return self.number()
        if char.isalpha() or char == "_":
            return self.named()
        self.error(f"unexpected character {char!r}")

    def named(self) -> Any:
        start = self.pos
        ident = self.identifier()
        if ident == "true":
            return True
        if ident == "false":
            return False
        if ident == "None":
            return None
        if ident == "inf":
            return float("inf")
        if ident == "NaN":
            return float("nan")
        self.skip_ws()
        if ident == "Some":
            if self.peek() != "(":
                self.error("expected '(' after Some", start)
            self.pos += 1
            inner = self.value()
            self.expect(")")
            return inner
        if self.peek() == "(":
            self.pos += 1
            return self.paren_body(named=True)
        # unit struct or unit enum variant
        return ident

    def paren_body(self, named: bool) -> Any:
        self.skip_ws()
        if self.peek() == ")":
            self.pos += 1
            return {} if named else None
        if self.looks_like_field():
            return self.struct_fields()
        items, trailing = self.sequence(")")
        # Name(x) is a newtype, Name(x,) a one element tuple struct
        if named and len(items) == 1 and not trailing:
            return items[0]
        return tuple(items)

    def looks_like_field(self) -> bool:
        saved = self.pos
        try:
            ident = self.match(_IDENT_RE)
            if not ident:
                return False
            self.pos += len(ident)
            self.skip_ws()
            return self.peek() == ":" and self.peek(1) != ":"
        finally:
            self.pos = saved

    def struct_fields(self) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        while True:
            self.skip_ws()
            if self.peek() == ")":
                self.pos += 1
                return fields
            start = self.pos
            name = self.identifier()
            if name in fields:
                self.error(f"duplicate field {name!r}", start)
            self.expect(":")
            fields[name] = self.value()
            if not self.consume(","):
                self.expect(")")
                return fields

    def sequence(self, close: str) -> Tuple[List[Any], bool]:
        """Items up to ``close`` and whether the last one had a trailing comma"""
        items: List[Any] = []
        trailing = False
        while True:
            self.skip_ws()
            if self.peek() == close:
                self.pos += 1
                return items, trailing
            items.append(self.value())
            trailing = self.consume(",")
            if not trailing:
                self.expect(close)
                return items, trailing

    def list_(self) -> List[Any]:
        self.pos += 1
        items, _ = self.sequence("]")
        return items

    def map_(self) -> Dict[Any, Any]:
        self.pos += 1
        result: Dict[Any, Any] = {}
        while True:
            self.skip_ws()
            if self.peek() == "}":
                self.pos += 1
                return result
            start = self.pos
            key = self.value()
            try:
                hash(key)
            except TypeError:
                self.error("map key is not hashable", start)
            self.expect(":")
            result[key] = self.value()
            if not self.consume(","):
                self.expect("}")
                return result

    # Scalars -------------------------------------------------------------

    def number(self) -> Any:
        start = self.pos
        sign = self.peek() if self.peek() in "+-" else ""
        if sign and _IDENT_RE.match(self.text, self.pos + 1):
            self.pos += 1
            ident = self.identifier()
            if ident == "inf":
                return float(sign + "inf")
            if ident == "NaN":
                return float("nan")
            self.error(f"unexpected identifier {ident!r} after sign", start)

        literal = self.match(_INT_PREFIXED_RE)
        if literal:
            self.pos += len(literal)
            self.number_suffix(start)
            body = literal.replace("_", "")
            negative = body.startswith("-")
            digits = body.lstrip("+-")
            base = {"x": 16, "b": 2, "o": 8}[digits[1]]
            value = int(digits[2:], base)
            return -value if negative else value

        literal = self.match(_FLOAT_RE)
        if literal:
            self.pos += len(literal)
            self.number_suffix(start)
            return float(literal.replace("_", ""))

        literal = self.match(_INT_RE)
        if literal:
            self.pos += len(literal)
            self.number_suffix(start)
            return int(literal.replace("_", ""))

        self.error("invalid number", start)

    def number_suffix(self, start: int) -> None:
        suffix = self.match(_NUMBER_SUFFIX_RE)
        self.pos += len(suffix)
        char = self.peek()
        if char and (char.isalnum() or char == "_"):
            self.error("invalid number", start)

    def string(self) -> str:
        start = self.pos
        self.pos += 1
        parts: List[str] = []
        text = self.text
        while True:
            if self.pos >= len(text):
                self.error("unterminated string", start)
            char = text[self.pos]
            if char == '"':
                self.pos += 1
                return "".join(parts)
            if char == "\\":
                parts.append(self.escape())
            else:
                parts.append(char)
                self.pos += 1

    def escape(self) -> str:
        start = self.pos
        self.pos += 1
        char = self.peek()
        if char in _SIMPLE_ESCAPES:
            self.pos += 1
            return _SIMPLE_ESCAPES[char]
        if char == "\n":
            # line continuation
            self.pos += 1
            while self.peek() and self.peek().isspace():
                self.pos += 1
            return ""
        if char == "x":
            digits = self.text[self.pos + 1:self.pos + 3]
            if len(digits) != 2 or not _is_hex(digits):
                self.error("invalid \\x escape", start)
            self.pos += 3
            return chr(int(digits, 16))
        if char == "u":
            if self.peek(1) == "{":
                end = self.text.find("}", self.pos)
                digits = self.text[self.pos + 2:end] if end != -1 else ""
                if not 1 <= len(digits) <= 6 or not _is_hex(digits):
                    self.error("invalid \\u{...} escape", start)
                self.pos = end + 1
            else:
                digits = self.text[self.pos + 1:self.pos + 5]
                if len(digits) != 4 or not _is_hex(digits):
                    self.error("invalid \\u escape", start)
                self.pos += 5
            code = int(digits, 16)
            if code > 0x10FFFF:
                self.error("unicode escape out of range", start)
            return chr(code)
        self.error(f"unknown escape sequence \\{char}", start)

    def raw_string(self) -> str:
        start = self.pos
        self.pos += 1
        hashes = 0
        while self.peek() == "#":
            hashes += 1
            self.pos += 1
        if self.peek() != '"':
            self.error("expected '\"' to open raw string", start)
        self.pos += 1
        terminator = '"' + "#" * hashes
        end = self.text.find(terminator, self.pos)
        if end == -1:
            self.error("unterminated raw string", start)
        value = self.text[self.pos:end]
        self.pos = end + len(terminator)
        return value

    def char(self) -> str:
        start = self.pos
        self.pos += 1
        if self.peek() == "\\":
            value = self.escape()
        elif self.peek() in ("", "'"):
            self.error("empty character literal", start)
        else:
            value = self.peek()
            self.pos += 1
        if self.peek() != "'":
            self.error("unterminated character literal", start)
        self.pos += 1
        return value


def _is_hex(digits: str) -> bool:
    return all(c in "0123456789abcdefABCDEF" for c in digits)


def loads(text: str) -> Any:
    """Parse a RON document into plain Python data

    Raises:
        RonSyntaxError: if the text is not valid RON
    """
    return _Parser(text).document()
