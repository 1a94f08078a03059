# ==============================================
# Properties File Format
# ==============================================
#
# PURPOSE:
#   Read and write the flat `key=value` text format so that a bound
#   object's properties can survive restarts in a file.
#
# WHY THIS FILE EXISTS:
#   The binder only knows {key: raw string} mappings. This module is
#   the thin layer that turns such a mapping into text and back.
#
# FORMAT:
# -------
#   # comment            → ignored (also lines starting with "!")
#   key=value            → "key": "value"
#   key: value           → ":" works as a separator too
#   key = value          → whitespace around the separator is dropped
#   long = first,\       → a trailing backslash continues the line;
#          second          leading whitespace of the next line is dropped
#   tab = a\tb           → \t \n \r \f \\ \= \: \# \! and \uXXXX escapes
#
#   Trailing whitespace of a value is kept. A repeated key keeps its
#   last value.
#
# FUNCTIONS:
# ----------
# - loads(text) -> dict[str, str]
# - load(fp) -> dict[str, str]
# - dumps(mapping, comments=None) -> str
# - dump(mapping, fp, comments=None) -> None
#
# ==============================================

import re
from typing import Dict, Iterable, List, Mapping, Optional, TextIO, Union

# Only these end a line; str.splitlines() would also break on \x0b or \x85
_LINE_BREAK = re.compile(r'\r\n|\r|\n')
_SEPARATORS = "=:"
_WHITESPACE = " \t\f"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def loads(text: str) -> Dict[str, str]:
    """
    Parse properties text.

    Args:
        text: Content of a properties file

    Returns:
        Mapping of key to raw value, in file order
    """
    properties: Dict[str, str] = {}
    for line in _logical_lines(_LINE_BREAK.split(text)):
        key, value = _split_entry(line)
        properties[_unescape(key)] = _unescape(value)
    return properties


def load(fp: TextIO) -> Dict[str, str]:
    """Parse properties from an open text stream."""
    return loads(fp.read())


def dumps(mapping: Mapping[str, str], comments: Optional[Union[str, Iterable[str]]] = None) -> str:
    """
    Render a mapping as properties text.

    Args:
        mapping: Key to raw value, e.g. PropertiesBinder.extract_properties()
        comments: Header comment, one string per line or a single string

    Returns:
        The properties text, one entry per line
    """
    lines: List[str] = []
    if comments is not None:
        if isinstance(comments, str):
            comments = comments.splitlines()
        lines.extend(f"# {comment}" if comment else "#" for comment in comments)

    for key, value in mapping.items():
        lines.append(f"{_escape(key, is_key=True)}={_escape(value, is_key=False)}")
    return "\n".join(lines) + "\n" if lines else ""


def dump(
    mapping: Mapping[str, str],
    fp: TextIO,
    comments: Optional[Union[str, Iterable[str]]] = None,
) -> None:
    """Write a mapping as properties text to an open stream."""
    fp.write(dumps(mapping, comments))


# ======================================
# Internal helpers
# ======================================
def _logical_lines(natural_lines: Iterable[str]):
    buffer: Optional[str] = None
    for natural in natural_lines:
        stripped = natural.lstrip(_WHITESPACE)

        if buffer is None:
            if not stripped or stripped[0] in "#!":
                continue
            buffer = ""

        if _continues(stripped):
            buffer += stripped[:-1]
            continue

        yield buffer + stripped
        buffer = None

    if buffer:
        yield buffer


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str):
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text

    out = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char != "\\" or index + 1 >= length:
            out.append(char)
            index += 1
            continue

        escaped = text[index + 1]
        if escaped == "u" and index + 6 <= length:
            try:
                out.append(chr(int(text[index + 2:index + 6], 16)))
                index += 6
                continue
            except ValueError:
                pass
        out.append(_ESCAPES.get(escaped, escaped))
        index += 2
    return "".join(out)


def _escape(text: str, is_key: bool) -> str:
    out = []
    for position, char in enumerate(text):
        if char == "\\":
            out.append("\\\\")
        elif char == "\n":
            out.append("\\n")
        elif char == "\r":
            out.append("\\r")
        elif char == "\t":
            out.append("\\t")
        elif char == "\f":
            out.append("\\f")
        elif char == " " and (is_key or position == 0):
            out.append("\\ ")
        elif is_key and char in "=:#!":
            out.append("\\" + char)
        else:
            out.append(char)
    return "".join(out)
