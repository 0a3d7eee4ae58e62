# parser.py -- Parse gitconfig style text into a flat mapping
# Copyright (C) 2026 The gitconf authors
#
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later
# gitconf is dual-licensed under the Apache License, Version 2.0 and the GNU
# General Public License as published by the Free Software Foundation; version 2.0
# or (at your option) any later version. You can redistribute it and/or
# modify it under the terms of either of these two licenses.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# You should have received a copy of the licenses; if not, see
# <http://www.gnu.org/licenses/> for a copy of the GNU General Public License
# and <http://www.apache.org/licenses/LICENSE-2.0> for a copy of the Apache
# License, Version 2.0.
#

"""Parsing of gitconfig style files.

Settings are returned as a flat dictionary keyed by dotted names::

    [core]
        bare = false
    [remote "Origin"]
        url = https://example.com/repo.git

becomes ``{"core.bare": "false", "remote.Origin.url": "https://..."}``.
Section and variable names are lower-cased, quoted subsection names keep
their case. Values are returned as strings, without any interpretation.
"""

__all__ = [
    "ParseResult",
    "load",
    "loads",
    "parse",
]

from typing import IO, NamedTuple

from .errors import (
    InvalidEscapeSequence,
    InvalidKeyChar,
    InvalidSectionChar,
    MissingClosingBracket,
    MissingStartQuote,
    ParseError,
    SectionNewLine,
    UnexpectedEOF,
    UnfinishedQuote,
)
from .log_utils import getLogger
from .scanner import Scanner, isalpha, iskeychar, isspace, lower

logger = getLogger(__name__)

_COMMENT_CHARS = ("#", ";")

_ESCAPE_TABLE = {
    "n": "\n",
    "t": "\t",
    "b": "\b",
}

_SUBSECTION_ESCAPES = ('"', "\\")


class ParseResult(NamedTuple):
    """Outcome of parsing one configuration file.

    ``config`` holds every setting read before ``error`` (if any) was hit,
    ``lineno`` is the line the parser stopped on.
    """

    config: dict[str, str]
    lineno: int
    error: ParseError | None = None


def _read_section_key(scanner: Scanner) -> str:
    # [section] or [section.subsection]
    name = ""
    while True:
        c = scanner.next()
        if c is None:
            raise UnexpectedEOF(scanner.lineno)
        if c == "]":
            return name
        if isspace(c):
            return _read_extended_section_key(scanner, name, c)
        if not iskeychar(c) and c != ".":
            raise InvalidSectionChar(scanner.lineno)
        name += lower(c)


def _read_extended_section_key(scanner: Scanner, name: str, c: str) -> str:
    # [section "Subsection"]
    while isspace(c):
        if c == "\n":
            scanner.unread_line()
            raise SectionNewLine(scanner.lineno)
        following = scanner.next()
        if following is None:
            raise UnexpectedEOF(scanner.lineno)
        c = following
    if c != '"':
        raise MissingStartQuote(scanner.lineno)

    subsection: list[str] = []
    while True:
        ch = scanner.next()
        if ch is None:
            raise UnexpectedEOF(scanner.lineno)
        if ch == "\n":
            scanner.unread_line()
            raise SectionNewLine(scanner.lineno)
        if ch == '"':
            break
        if ch == "\\":
            ch = scanner.next()
            if ch is None:
                raise UnexpectedEOF(scanner.lineno)
            if ch == "\n":
                scanner.unread_line()
                raise SectionNewLine(scanner.lineno)
            if ch not in _SUBSECTION_ESCAPES:
                raise InvalidEscapeSequence(scanner.lineno)
        subsection.append(ch)

    ch = scanner.next()
    if ch is None:
        raise UnexpectedEOF(scanner.lineno)
    if ch != "]":
        scanner.unread_line()
        raise MissingClosingBracket(scanner.lineno)
    return name + "." + "".join(subsection)


def _read_value(scanner: Scanner) -> str:
    """Read the right hand side of an assignment, up to the end of line.

    Whitespace outside quotes is collapsed at both ends of the value but
    kept (as spaces) in between words. A backslash at the end of a line
    continues the value on the next line.
    """
    value: list[str] = []
    quote = False
    comment = False
    space = 0
    while True:
        c = scanner.next()
        if c is None or c == "\n":
            if quote:
                scanner.unread_line()
                raise UnfinishedQuote(scanner.lineno)
            return "".join(value)
        if comment:
            continue
        if not quote:
            if isspace(c):
                if value:
                    space += 1
                continue
            if c in _COMMENT_CHARS:
                comment = True
                continue
        if space:
            value.append(" " * space)
            space = 0
        if c == "\\":
            c = scanner.next()
            if c is None or c == "\n":
                continue
            try:
                value.append(_ESCAPE_TABLE[c])
            except KeyError:
                raise InvalidEscapeSequence(scanner.lineno) from None
            continue
        if c == '"':
            quote = not quote
            continue
        value.append(c)


def _read_setting(scanner: Scanner, name: str) -> tuple[str, str]:
    c = scanner.next()
    while c is not None and iskeychar(c):
        name += lower(c)
        c = scanner.next()

    while c == " " or c == "\t":
        c = scanner.next()

    # "name" on its own line is a setting with an empty value
    if c is None or c == "\n":
        return name, ""
    if c != "=":
        raise InvalidKeyChar(scanner.lineno)
    return name, _read_value(scanner)


def _parse(scanner: Scanner, config: dict[str, str]) -> None:
    comment = False
    section = ""
    while True:
        c = scanner.next()
        if c is None:
            return
        if c == "\n":
            comment = False
            continue
        if comment or isspace(c):
            continue
        if c in _COMMENT_CHARS:
            comment = True
            continue
        if c == "[":
            section = _read_section_key(scanner)
            logger.debug("Entering section %r on line %d", section, scanner.lineno)
            section += "."
            continue
        if not isalpha(c):
            raise InvalidKeyChar(scanner.lineno)
        key, value = _read_setting(scanner, section + lower(c))
        config[key] = value


def _decode(data: bytes | str, encoding: str) -> str:
    if isinstance(data, bytes):
        text = data.decode(encoding, errors="replace")
    else:
        text = data
    # byte order mark, as written by some Windows editors
    if text.startswith("\ufeff"):
        text = text[1:]
    return text


def parse(data: bytes | str, *, encoding: str = "utf-8") -> ParseResult:
    """Parse configuration text.

    Parsing stops at the first syntax error. The error is not raised but
    returned, together with whatever was read before it.

    Args:
      data: Contents of a configuration file
      encoding: Codec used to decode ``data`` if it is bytes; undecodable
        sequences are replaced by U+FFFD

    Returns:
      ParseResult, which unpacks as ``(config, lineno, error)``
    """
    scanner = Scanner(_decode(data, encoding))
    config: dict[str, str] = {}
    try:
        _parse(scanner, config)
    except ParseError as e:
        e.config = config
        logger.debug("%s", e)
        return ParseResult(config, scanner.lineno, e)
    logger.debug("Read %d settings from %d lines", len(config), scanner.lineno)
    return ParseResult(config, scanner.lineno)


def loads(data: bytes | str, *, encoding: str = "utf-8") -> dict[str, str]:
    """Parse configuration text, raising on syntax errors.

    Raises:
      ParseError: On the first syntax error; its ``config`` attribute
        holds the settings read up to that point
    """
    config, lineno, error = parse(data, encoding=encoding)
    if error is not None:
        raise error
    return config


def load(f: IO[bytes], *, encoding: str = "utf-8") -> dict[str, str]:
    """Read configuration from a binary file-like object.

    Args:
      f: File-like object to read from
      encoding: Codec used to decode the file
    """
    return loads(f.read(), encoding=encoding)
