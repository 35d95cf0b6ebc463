"""A small flat JSON reader and string-building JSON writer."""

from __future__ import annotations

import re
from typing import Any, Optional

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _trims(s: str, lc: str, rc: str) -> str:
    """Text between the first lc and the last rc, if both occur."""
    if lc in s and rc in s:
        b = s.index(lc)
        e = s.rindex(rc)
        return s[b + 1 : e] if e - b - 1 >= 0 else s[b + 1 :]
    return s


def _first_not_space(s: str, cur: int) -> int:
    for i in range(cur, len(s)):
        if s[i] not in _SPACE:
            return i - cur
    return 0


def _fetch_bracketed(text: str, inpos: int, open_c: str, close_c: str) -> tuple:
    depth = 0
    chars = []
    i = inpos + _first_not_space(text, inpos)
    while i < len(text):
        c = text[i]
        if c == open_c:
            depth += 1
        if c == close_c:
            depth -= 1
        chars.append(c)
        if depth == 0:
            break
        i += 1
    return "".join(chars), i - inpos


def _fetch_str(text: str, inpos: int) -> tuple:
    quotes = 0
    chars = []
    i = inpos + _first_not_space(text, inpos)
    while i < len(text):
        c = text[i]
        if c == '"':
            quotes += 1
        chars.append(c)
        if quotes % 2 == 0 and c in ",:":
            break
        i += 1
    return _trims("".join(chars), '"', '"'), i - inpos


def _fetch_num(text: str, inpos: int) -> tuple:
    chars = []
    i = inpos + _first_not_space(text, inpos)
    while i < len(text):
        c = text[i]
        if c == ",":
            break
        chars.append(c)
        i += 1
    return "".join(chars), i - inpos


def _format_scalar(v: Any) -> str:
    if isinstance(v, float):
        return "%g" % v
    return str(v)


class Value:
    """One written item: a serialised key/value pair, or a bare value."""

    def __init__(self, value: Optional[str] = None) -> None:
        if value is None:
            self.value = ""
            self.nokey = False
        else:
            self.value = value
            self.nokey = value == ""

    def get_as(self, kind: type = str) -> Any:
        """Interpret the raw text as str, bool, int or float."""
        if kind is str:
            return self.value
        if kind is bool:
            return self.value == "true"
        if kind is int:
            m = _INT_RE.match(self.value)
            return int(m.group(1)) if m else 0
        if kind is float:
            m = _FLOAT_RE.match(self.value)
            return float(m.group(1)) if m else 0.0
        raise TypeError(f"unsupported value kind: {kind!r}")

    def _keyed(self, text: str) -> str:
        return text if self.nokey else f'"{self.value}":{text}'

    def set(self, v: Any) -> None:
        """Store v, prefixed by this item's key unless it has none."""
        if isinstance(v, TinyJson):
            if v.sub_type == 1:
                self.value = f'"{self.value}":{v.write_json(2)}'
            else:
                self.value = self._keyed(v.write_json())
        elif isinstance(v, bool):
            self.value = self._keyed("true" if v else "false")
        elif isinstance(v, str):
            self.value = self._keyed(f'"{v}"')
        else:
            self.value = self._keyed(_format_scalar(v))

    def push(self, item: "TinyJson") -> None:
        """Store a whole document, bare if it has no keys, else as an object."""
        self.value = item.write_json(0 if item.nokey else 1)


class JsonParser:
    """Splits one nesting level of JSON text into flat tokens."""

    def __init__(self) -> None:
        self.key_values: list = []

    def parse_array(self, json: str) -> list:
        """Split the elements of an array into their raw texts."""
        text = _trims(json, "[", "]")
        items = []
        token = ""
        n = len(text)
        i = 0
        while i < n:
            c = text[i]
            if c in _SPACE or c == '"':
                i += 1
                continue
            if c in ":,{":
                if token:
                    items.append(token)
                    token = ""
                if c == ",":
                    i += 1
                    continue
                offset = 0
                nextc = c
                if c != "{":
                    while True:
                        i += 1
                        nextc = text[i] if i < n else "\0"
                        if nextc not in _SPACE:
                            break
                if nextc == "{":
                    token, offset = _fetch_bracketed(text, i, "{", "}")
                elif nextc == "[":
                    token, offset = _fetch_bracketed(text, i, "[", "]")
                i += offset + 1
                continue
            token += c
            i += 1
        if token:
            items.append(token)
        return items

    def parse_obj(self, json: str) -> list:
        """Append the keys and values of an object, in order, and return them all."""
        text = _trims(json, "{", "}")

        def last_valid_char(index: int) -> str:
            for ch in reversed(text[:index]):
                if ch not in _SPACE:
                    return ch
            return "\0"

        i = 0
        while i < len(text):
            c = text[i]
            if c in _SPACE:
                i += 1
                continue
            if c == "{":
                token, offset = _fetch_bracketed(text, i, "{", "}")
            elif c == "[":
                token, offset = _fetch_bracketed(text, i, "[", "]")
            elif c == '"':
                token, offset = _fetch_str(text, i)
            elif (c in _DIGITS or c == "-") and last_valid_char(i) == ":":
                token, offset = _fetch_num(text, i)
            else:
                i += 1
                continue
            self.key_values.append(token)
            i += offset + 1
        if not self.key_values:
            self.key_values.append(text)
        return list(self.key_values)


class TinyJson:
    """Reads flat key/value documents and writes JSON item by item."""

    def __init__(self) -> None:
        self.key_values: list = []
        self.items: list = []
        self.nokey = False
        self.sub_type = 0

    def read_json(self, json: str) -> None:
        """Replace the read tokens with those of json."""
        self.key_values = JsonParser().parse_obj(json)

    def get(self, key: str, default: Any = None, kind: Optional[type] = None) -> Any:
        """The token after key, as kind; default when key is absent."""
        if kind is None:
            kind = type(default) if default is not None else str
        if default is None:
            default = kind()
        try:
            index = self.key_values.index(key)
        except ValueError:
            return default
        if index + 1 >= len(self.key_values):
            return default
        return Value(self.key_values[index + 1]).get_as(kind)

    def get_value(self, kind: type = str) -> Any:
        """The first token, as kind."""
        return Value(self.key_values[0]).get_as(kind)

    def get_array(self, key: str) -> "ValueArray":
        """The elements of the array or object stored under key."""
        raw = self.get(key, kind=str)
        return ValueArray(JsonParser().parse_array(raw))

    def __getitem__(self, key: str) -> Value:
        value = Value(key)
        self.items.append(value)
        if key == "":
            self.nokey = True
        return value

    def push(self, item: "TinyJson") -> None:
        """Append a document as an array element."""
        value = Value("")
        self.items.append(value)
        self.nokey = True
        value.push(item)
        self.sub_type = 1

    def write_json(self, kind: int = 1) -> str:
        """Serialise items: kind 0 bare, 1 as an object, anything else as an array."""
        if kind == 0:
            prefix, suffix = "", ""
        elif kind == 1:
            prefix, suffix = "{", "}"
        else:
            prefix, suffix = "[", "]"
        return prefix + ",".join(v.value for v in self.items) + suffix

    def __str__(self) -> str:
        return self.write_json()


class ValueArray(TinyJson):
    """Raw element texts of an array; enter one to read it."""

    def __init__(self, elements: Optional[list] = None) -> None:
        super().__init__()
        self.elements = list(elements) if elements else []

    def enter(self, i: int) -> None:
        """Read element i as the current document."""
        self.read_json(self.elements[i])

    def __len__(self) -> int:
        return len(self.elements)