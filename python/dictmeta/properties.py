"""Flat property-list files (Java .properties style).

Format:
    # comment            # also "!" comments
    key=value            # "=", ":" or whitespace separate key and value
    key = long \\
          value          # trailing backslash continues the line
    key=caf\\u00e9        # \\uXXXX escapes

Files are read and written as UTF-8 text by default.
"""

import re
from typing import Iterator, Mapping, TextIO

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ESCAPE_PATTERN = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_KEY_END = re.compile(r"(?<!\\)(?:\\\\)*[=:\s]")


def _unescape(text: str) -> str:
    def replace(match: re.Match) -> str:
        token = match.group(1)
        if len(token) == 5 and token[0] == "u":
            return chr(int(token[1:], 16))
        return _ESCAPES.get(token, token)

    return _ESCAPE_PATTERN.sub(replace, text)


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(lines: Iterator[str]) -> Iterator[tuple[str, int]]:
    """Yield (logical_line, line_number), joining continued lines."""
    pending = None
    start = 0
    for line_num, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if pending is None:
            stripped = line.lstrip()
            if not stripped or stripped[0] in "#!":
                continue
            pending, start = stripped, line_num
        else:
            pending += line.lstrip()

        if _ends_with_continuation(pending):
            pending = pending[:-1]
            continue

        yield pending, start
        pending = None

    if pending is not None:
        yield pending, start


def _split_line(line: str) -> tuple[str, str]:
    match = _KEY_END.search(line)
    if match is None:
        return line, ""
    key = line[:match.end() - 1]
    rest = line[match.end() - 1:]

    # Separator: optional whitespace, at most one "=" or ":", optional whitespace
    rest = rest.lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return key, rest


def parse(lines: Iterator[str]) -> dict[str, str]:
    """Parse property lines into an ordered key -> value dict.

    Later duplicates of a key replace earlier ones.

    Args:
        lines: Text lines (e.g., an open text file).

    Returns:
        Dict of unescaped keys and values, in file order.
    """
    properties: dict[str, str] = {}
    for line, _ in _logical_lines(iter(lines)):
        key, value = _split_line(line)
        properties[_unescape(key)] = _unescape(value)
    return properties


def _escape(text: str, is_key: bool) -> str:
    result = []
    for i, char in enumerate(text):
        if char == "\\":
            result.append("\\\\")
        elif char in "\t\n\r\f":
            result.append("\\" + {"\t": "t", "\n": "n", "\r": "r", "\f": "f"}[char])
        elif char == " " and (is_key or i == 0):
            result.append("\\ ")
        elif is_key and char in "=:#!":
            result.append("\\" + char)
        elif not is_key and i == 0 and char in "=:":
            result.append("\\" + char)
        elif not char.isprintable():
            result.append(f"\\u{ord(char):04x}" if ord(char) <= 0xFFFF else char)
        else:
            result.append(char)
    return "".join(result)


def dump(properties: Mapping[str, str], writer: TextIO, comment: str | None = None) -> None:
    """Write properties as "key=value" lines, preceded by an optional comment.

    Args:
        properties: Key -> value, written in iteration order.
        writer: Text stream to write to. It is not closed.
        comment: Comment text for the first line (without "#").
    """
    if comment is not None:
        for comment_line in comment.splitlines() or [""]:
            writer.write(f"# {comment_line}\n")
    for key, value in properties.items():
        writer.write(f"{_escape(key, True)}={_escape(value, False)}\n")
