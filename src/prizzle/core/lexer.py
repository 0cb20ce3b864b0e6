"""
Line normalization and small tokenizers for schema text.

The schema format is line oriented, so instead of a token stream the lexer
produces normalized lines (comments stripped, blanks dropped) that keep their
source line numbers, plus helpers to split the pieces of a single line:
attribute calls, argument lists and keyword arguments.
"""

import re
from dataclasses import dataclass

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {")", "]", "}"}

_KEYWORD_ARG = re.compile(r"^(\w+)\s*:\s*(.*)$", re.DOTALL)
_RAW_OPS = re.compile(r'^raw\("(.+?)"\)$')


@dataclass(frozen=True)
class Line:
    """A normalized schema line and its 1-indexed source line number."""

    number: int
    text: str


@dataclass(frozen=True)
class AttributeCall:
    """
    One attribute token from the tail of a field line.

    Attributes:
        name: Attribute name without the leading '@' (e.g. "default", "db.SmallInt")
        args: Text between the outer parentheses, or None when there were none
        raw: Token exactly as written
        column: 1-indexed position of the token inside the scanned text
    """

    name: str
    args: str | None
    raw: str
    column: int

    @property
    def is_attribute(self) -> bool:
        return self.raw.startswith("@")


def strip_comment(text: str) -> str:
    """Remove a '//' comment, ignoring '//' inside string literals."""
    in_string = False
    i = 0
    while i < len(text):
        ch = text[i]
        if in_string:
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif text.startswith("//", i):
            return text[:i]
        i += 1
    return text


def normalize_lines(text: str) -> list[Line]:
    """
    Split schema text into normalized lines.

    Comments (including '///' doc comments) are stripped, every line is
    trimmed, and lines that end up empty are dropped.
    """
    lines: list[Line] = []
    for number, raw in enumerate(text.splitlines(), start=1):
        stripped = strip_comment(raw).strip()
        if stripped:
            lines.append(Line(number=number, text=stripped))
    return lines


def find_closing(text: str, start: int) -> int:
    """
    Return the index of the bracket closing the one at ``text[start]``.

    Nested brackets and double-quoted strings are skipped over.

    Raises:
        ValueError: If the bracket is never closed
    """
    stack = [_OPENERS[text[start]]]
    in_string = False
    i = start + 1
    while i < len(text):
        ch = text[i]
        if in_string:
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch in _OPENERS:
            stack.append(_OPENERS[ch])
        elif ch in _CLOSERS:
            if ch != stack.pop():
                raise ValueError(f"Mismatched '{ch}' in: {text}")
            if not stack:
                return i
        i += 1
    raise ValueError(f"Unclosed '{text[start]}' in: {text}")


def split_field_line(text: str) -> tuple[str, str, str]:
    """
    Split a field line into name, type token and trailing attribute text.

    The type token may contain parentheses with spaces, e.g.
    ``Unsupported("geometry(Point, 4326)")``.

    Raises:
        ValueError: If the line has no type token
    """
    parts = text.split(None, 1)
    if len(parts) < 2:
        raise ValueError(f"Expected '<name> <type>' but got: {text}")
    name, remainder = parts

    i = 0
    while i < len(remainder) and not remainder[i].isspace():
        if remainder[i] in _OPENERS:
            i = find_closing(remainder, i)
        i += 1

    return name, remainder[:i], remainder[i:].strip()


def scan_attributes(text: str) -> list[AttributeCall]:
    """
    Tokenize attribute text into ``@name`` / ``@name(args)`` calls.

    Anything that is not an attribute is returned as a token of its own
    (with ``is_attribute`` False) so the caller can reject it.

    Raises:
        ValueError: If an argument list is never closed
    """
    calls: list[AttributeCall] = []
    i = 0
    n = len(text)
    while i < n:
        if text[i].isspace():
            i += 1
            continue

        start = i
        if text[i] == "@":
            i += 1
            while i < n and (text[i].isalnum() or text[i] in "_."):
                i += 1
            name = text[start + 1 : i]
            args = None
            if i < n and text[i] == "(":
                end = find_closing(text, i)
                args = text[i + 1 : end].strip()
                i = end + 1
            calls.append(AttributeCall(name, args, text[start:i], start + 1))
            continue

        while i < n and not text[i].isspace():
            i += 1
        calls.append(AttributeCall(text[start:i], None, text[start:i], start + 1))

    return calls


def split_arguments(text: str) -> list[str]:
    """
    Split an argument list on top-level commas.

    ``fields: [a, b], references: [id]`` -> ``["fields: [a, b]", "references: [id]"]``
    """
    args: list[str] = []
    current_start = 0
    in_string = False
    i = 0
    while i < len(text):
        ch = text[i]
        if in_string:
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch in _OPENERS:
            i = find_closing(text, i)
        elif ch == ",":
            args.append(text[current_start:i])
            current_start = i + 1
        i += 1
    args.append(text[current_start:])
    return [a.strip() for a in args if a.strip()]


def split_keyword(arg: str) -> tuple[str | None, str]:
    """Split ``key: value`` into its parts; positional arguments get key None."""
    match = _KEYWORD_ARG.match(arg)
    if match:
        return match.group(1), match.group(2).strip()
    return None, arg


def split_list(value: str) -> list[str]:
    """Expand ``[a, b]`` into its elements; a bare value becomes a one-item list."""
    value = value.strip()
    if value.startswith("[") and value.endswith("]"):
        return split_arguments(value[1:-1])
    return [value]


def unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def unwrap_raw(value: str) -> str:
    """Turn ``raw("gin_trgm_ops")`` into ``gin_trgm_ops``; other values pass through."""
    match = _RAW_OPS.match(value.strip())
    if match:
        return match.group(1)
    return value.strip()
