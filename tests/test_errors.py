# test_errors.py -- Tests for parse errors
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

"""Tests for gitconf.errors."""

import pickle

from gitconf.errors import (
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

from . import TestCase

ALL_ERRORS = [
    InvalidEscapeSequence,
    InvalidKeyChar,
    InvalidSectionChar,
    MissingClosingBracket,
    MissingStartQuote,
    SectionNewLine,
    UnexpectedEOF,
    UnfinishedQuote,
]


class ParseErrorTests(TestCase):
    def test_hierarchy(self) -> None:
        for cls in ALL_ERRORS:
            self.assertTrue(issubclass(cls, ParseError), cls)
            self.assertTrue(issubclass(cls, ValueError), cls)

    def test_distinct_messages(self) -> None:
        messages = {cls.message for cls in ALL_ERRORS}
        self.assertEqual(len(ALL_ERRORS), len(messages))

    def test_str(self) -> None:
        self.assertEqual("missing end quote (line 3)", str(UnfinishedQuote(3)))
        self.assertEqual(
            "unexpected end of file (line 1)", str(UnexpectedEOF(1))
        )

    def test_attributes(self) -> None:
        e = InvalidKeyChar(7, {"a.b": "c"})
        self.assertEqual(7, e.lineno)
        self.assertEqual({"a.b": "c"}, e.config)

    def test_default_config(self) -> None:
        self.assertEqual({}, SectionNewLine(2).config)

    def test_pickle(self) -> None:
        e = pickle.loads(pickle.dumps(MissingStartQuote(4, {"x.y": "z"})))
        self.assertIsInstance(e, MissingStartQuote)
        self.assertEqual(4, e.lineno)
        self.assertEqual({"x.y": "z"}, e.config)
        self.assertEqual(str(MissingStartQuote(4)), str(e))
