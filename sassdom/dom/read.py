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
Simple helper functions to easily build DOM nodes reading from text.

By default the generated DOM nodes do not know their position in the
originating text. This is the best when building DOM snippets using this
module and inserting them in existing trees.

If you set the ``with_origin`` argument in the reader functions to True, every
node gets a :class:`~.source.LazySource`, so it knows its position in the
originating text. The ``url`` is stored with the source, for reference.

All functions raise :class:`~sassdom.lang.scss.ParseError` (a
:class:`ValueError`) if the text can't be read.

"""


from ..lang import scss
from .convert import convert_expression, convert_interpolation
from .expression import StringExpression
from .source import LazySource


def interpolation(text, with_origin=False, url=None):
    """Return an :class:`~.interpolation.Interpolation` from text with
    ``#{}`` holes.

    Example::

        >>> from sassdom.dom import read
        >>> node = read.interpolation('width-#{$size * 2}')
        >>> node.dump()
        <interpolation.Interpolation 'width-#{$size * 2}'>
         ╰╴<expression.BinaryOperationExpression '*'>
            ├╴<expression.VariableExpression '$size'>
            ╰╴<expression.NumberExpression '2'>

    """
    return convert_interpolation(scss.parse_interpolation(text, url), with_origin)


def expression(text, with_origin=False, url=None):
    """Return an :class:`~.expression.Expression` from the text.

    The text must be one expression, without leading or trailing
    whitespace.

    Example::

        >>> from sassdom.dom import read
        >>> node = read.expression('$a + 1px')
        >>> node.dump()
        <expression.BinaryOperationExpression '+'>
         ├╴<expression.VariableExpression '$a'>
         ╰╴<expression.NumberExpression '1px'>

    """
    return convert_expression(scss.parse_expression(text, url), with_origin)


def string(text, with_origin=False, url=None):
    """Return a :class:`~.expression.StringExpression` from the text.

    If the text starts with a quote, it is read as a quoted string, otherwise
    the whole text is the (unquoted) text of the string, which may contain
    ``#{}`` holes. Raises ValueError if a quoted text is not a single string.

    """
    if text[:1] in ('"', "'"):
        node = expression(text, with_origin, url)
        if not isinstance(node, StringExpression):
            raise ValueError("not a single quoted string: {!r}".format(text))
        return node
    origin = scss.parse_interpolation(text, url)
    node = StringExpression(convert_interpolation(origin, with_origin))
    if with_origin:
        node.source = LazySource(origin.span)
    return node
