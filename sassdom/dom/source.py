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
The source of a node: the piece of text it was read from.

A node that was converted from a parsed text (with ``with_origin`` set to
True) has a :class:`LazySource` in its ``source`` attribute. The line and
column numbers are only computed when they are asked for.

A source is never modified, so clones share the source of their original.

"""

import collections


#: A position in a text. The offset starts at 0, line and column at 1.
Position = collections.namedtuple("Position", "offset line column")
Position.offset.__doc__ = "The position in the text, from the start."
Position.line.__doc__ = "The line number, starting at 1."
Position.column.__doc__ = "The column number, starting at 1."


class LazySource:
    """The source of a node, wrapping the :class:`~sassdom.lang.inner.Span`
    of the inner node it was converted from.

    """
    __slots__ = ('span', '_start', '_end')

    def __init__(self, span):
        self.span = span
        self._start = None
        self._end = None

    def __repr__(self):
        return "<{} {}:{}>".format(type(self).__name__, self.span.start, self.span.end)

    @property
    def input(self):
        """The :class:`~sassdom.lang.inner.Input` the node was read from."""
        return self.span.input

    @property
    def url(self):
        """The url of the input, if known."""
        return self.span.input.url

    @property
    def start(self):
        """The :class:`Position` where the node starts."""
        if self._start is None:
            self._start = Position(self.span.start, *self.span.input.location(self.span.start))
        return self._start

    @property
    def end(self):
        """The :class:`Position` where the node ends."""
        if self._end is None:
            self._end = Position(self.span.end, *self.span.input.location(self.span.end))
        return self._end

    @property
    def text(self):
        """The original text of the node."""
        return self.span.text
