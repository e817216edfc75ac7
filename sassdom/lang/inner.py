# -*- coding: utf-8 -*-
#
# This file is part of `sassdom`, a library for Sass/SCSS source trees
#
# Copyright © 2019-2021 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
The read-only "inner" tree produced by the reader in :mod:`.scss`.

Every inner node is a named tuple with a ``span`` field, a :class:`Span`
pointing to the text the node was read from. The inner tree is converted
once into the editable DOM (see :mod:`sassdom.dom.convert`), and never
modified.

An interpolation (text with ``#{}`` holes) has a ``contents`` tuple with
strings and expressions, and a ``spans`` tuple with the span of every item.
Text items have the value of the text (escapes in quoted strings are
resolved), while the span points to the text as it was written.

"""

import bisect
import collections
import functools


class Input:
    """The text that was read, and optionally the url it was read from.

    Inputs are compared by identity, so they can be used as dictionary
    keys.

    """
    def __init__(self, text, url=None):
        self.text = text
        self.url = url

    def __repr__(self):
        return "<Input {}>".format(self.url or repr(self.text[:20]))

    @functools.cached_property
    def line_starts(self):
        """A list with the offset of the start of every line."""
        starts = [0]
        starts.extend(i + 1 for i, c in enumerate(self.text) if c == '\n')
        return starts

    def location(self, offset):
        """Return a tuple(line, column) for the offset; both start at 1."""
        line = bisect.bisect_right(self.line_starts, offset)
        return line, offset - self.line_starts[line - 1] + 1

    def to_json(self, input_id):
        """Return a dictionary describing this input, for JSON output."""
        return {'id': input_id, 'url': self.url, 'css': self.text}


class Span(collections.namedtuple("Span", "input start end")):
    """A fragment of an :class:`Input` from ``start`` to ``end``."""
    __slots__ = ()

    @property
    def text(self):
        """The text of this fragment."""
        return self.input.text[self.start:self.end]


Interpolation = collections.namedtuple("Interpolation", "contents spans span")
StringExpression = collections.namedtuple("StringExpression", "text has_quotes span")
NumberExpression = collections.namedtuple("NumberExpression", "value unit span")
VariableExpression = collections.namedtuple("VariableExpression", "namespace name span")
BooleanExpression = collections.namedtuple("BooleanExpression", "value span")
NullExpression = collections.namedtuple("NullExpression", "span")
BinaryOperationExpression = collections.namedtuple("BinaryOperationExpression", "operator left right span")
UnaryOperationExpression = collections.namedtuple("UnaryOperationExpression", "operator operand span")
ParenthesizedExpression = collections.namedtuple("ParenthesizedExpression", "expression span")
ListExpression = collections.namedtuple("ListExpression", "contents separator has_brackets span")
