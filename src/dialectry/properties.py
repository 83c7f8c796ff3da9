"""
Driver property files in the Java ``.properties`` format.

Keys and values are separated by ``=``, ``:`` or whitespace. ``#`` and ``!``
start comments, an odd number of trailing backslashes continues the line, and
``\\t``, ``\\n``, ``\\r``, ``\\f``, ``\\uXXXX`` and backslash-escaped characters
(``\\=``, ``\\:``, ``\\\\``, ``\\ ``) are unescaped in keys and values.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .errors import ConfigurationError

_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class PropertySource(Protocol):
    def load(self, path: str | Path) -> dict[str, str]: ...


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str):
    pending = ""
    for raw in text.splitlines():
        line = raw.lstrip()
        if not pending and (not line or line[0] in "#!"):
            continue
        if _continues(line):
            pending += line[:-1]
            continue
        yield pending + line
        pending = ""
    if pending:
        yield pending


def _unescape(text: str) -> str:
    chars: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char != "\\" or index + 1 == len(text):
            chars.append(char)
            index += 1
            continue
        escaped = text[index + 1]
        if escaped == "u":
            code = text[index + 2 : index + 6]
            if len(code) != 4:
                raise ConfigurationError(f"Malformed \\uXXXX escape in properties: {text!r}")
            try:
                chars.append(chr(int(code, 16)))
            except ValueError as exc:
                raise ConfigurationError(f"Malformed \\uXXXX escape in properties: {text!r}", cause=exc) from exc
            index += 6
            continue
        chars.append(_ESCAPES.get(escaped, escaped))
        index += 2
    return "".join(chars)


def _split_key(line: str) -> tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char.isspace():
            break
        index += 1
    key, rest = line[:index], line[index:].lstrip()
    if rest[:1] and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip()
    return key, rest


def parse_properties(text: str) -> dict[str, str]:
    properties: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_key(line)
        properties[_unescape(key)] = _unescape(value)
    return properties


class FilePropertySource:
    encoding = "utf-8"

    def load(self, path: str | Path) -> dict[str, str]:
        file_path = Path(path)
        if not file_path.is_file():
            raise ConfigurationError(f"Can't open driver specific properties from the file: '{path}'")
        return parse_properties(file_path.read_text(encoding=self.encoding))


def load_properties(path: str | Path) -> dict[str, str]:
    return FilePropertySource().load(path)
