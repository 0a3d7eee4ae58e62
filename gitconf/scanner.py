# scanner.py -- Character cursor for gitconfig text
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

"""Character cursor and character classes used by the config parser.

The scanner hands out one code point at a time, folds DOS and old Mac
line endings into ``\\n`` and keeps track of the current line number.
End of input is reported as ``None`` rather than as a fake newline, so
callers decide for themselves how to treat it.
"""

__all__ = [
    "Scanner",
    "isalnum",
    "isalpha",
    "iskeychar",
    "isnum",
    "isspace",
    "lower",
]

import unicodedata


class Scanner:
    """Single-use cursor over the text of one configuration file."""

    def __init__(self, text: str) -> None:
        """Initialize a Scanner.

        Args:
          text: Decoded configuration text
        """
        self._text = text
        self._pos = 0
        self._counted = False
        self.lineno = 1
        self.eof = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(lineno={self.lineno}, eof={self.eof})"

    def next(self) -> str | None:
        """Consume and return the next code point.

        Returns:
          A single character, with ``\\r\\n`` and ``\\r`` both returned as
          ``\\n``; None once the input is exhausted (and on every call
          after that).
        """
        if self._pos >= len(self._text):
            self.eof = True
            self._counted = False
            return None
        c = self._text[self._pos]
        self._pos += 1
        if c == "\r":
            if self._text.startswith("\n", self._pos):
                self._pos += 1
            c = "\n"
        self._counted = c == "\n"
        if self._counted:
            self.lineno += 1
        return c

    def unread_line(self) -> None:
        """Take back the line bump of the newline that was just consumed.

        Errors triggered by a line break are reported against the line the
        break terminates. Does nothing if the last character returned was
        not a newline.
        """
        if self._counted:
            self.lineno -= 1
            self._counted = False


# str.isspace() also accepts the C0 information separators
_NOT_WHITESPACE = "\x1c\x1d\x1e\x1f"


def isspace(c: str) -> bool:
    """Check for a character with the Unicode White_Space property."""
    return c.isspace() and c not in _NOT_WHITESPACE


def isalpha(c: str) -> bool:
    return unicodedata.category(c)[0] == "L"


def isnum(c: str) -> bool:
    return unicodedata.category(c)[0] == "N"


def isalnum(c: str) -> bool:
    return isalpha(c) or isnum(c)


def iskeychar(c: str) -> bool:
    """Check whether a character may appear in a variable or section name."""
    return isalnum(c) or c == "-"


def lower(c: str) -> str:
    # simple case mapping: U+0130 would otherwise gain a combining dot
    return c.lower()[:1]
