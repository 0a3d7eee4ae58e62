# errors.py -- errors for gitconf
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

"""Exceptions raised while parsing configuration text."""

__all__ = [
    "InvalidEscapeSequence",
    "InvalidKeyChar",
    "InvalidSectionChar",
    "MissingClosingBracket",
    "MissingStartQuote",
    "ParseError",
    "SectionNewLine",
    "UnexpectedEOF",
    "UnfinishedQuote",
]


class ParseError(ValueError):
    """Baseclass for all errors in configuration syntax.

    Do not instantiate directly.

    Subclasses define a message attribute describing the fault.
    """

    message: str

    def __init__(self, lineno: int, config: dict[str, str] | None = None) -> None:
        """Initialize a ParseError.

        Args:
            lineno: Line on which the fault was detected (1-based).
            config: Settings that were read before the fault.
        """
        self.lineno = lineno
        self.config = config if config is not None else {}
        ValueError.__init__(self, f"{self.message} (line {lineno})")

    def __reduce__(self):
        return (type(self), (self.lineno, self.config))


class InvalidKeyChar(ParseError):
    """Statement does not start a valid variable assignment."""

    message = "invalid key character"


class UnexpectedEOF(ParseError):
    """Input ended inside a section header."""

    message = "unexpected end of file"


class InvalidSectionChar(ParseError):
    """Section name contains an illegal character."""

    message = "invalid section name character"


class SectionNewLine(ParseError):
    """Line break inside a quoted section header."""

    message = "section header cannot contain a new line"


class MissingStartQuote(ParseError):
    message = "missing start quote in extended section"


class MissingClosingBracket(ParseError):
    message = "missing closing bracket after extended section"


class InvalidEscapeSequence(ParseError):
    message = "invalid escape sequence"


class UnfinishedQuote(ParseError):
    message = "missing end quote"
