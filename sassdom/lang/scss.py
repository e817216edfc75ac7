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
Reads Sass interpolations and SassScript expressions into a tree of
:mod:`.inner` nodes.

The grammar (in ``scss.lark``) is read by :mod:`lark` into an LALR parser with
a contextual lexer. Whitespace is kept in the tokens around it, so the span of
every inner node points exactly to its text, and all whitespace can be found
back between the spans.

The reader understands: numbers (with unit or percent sign), variables (with
optional namespace), ``true``, ``false``, ``null``, quoted and unquoted strings
(with ``#{}`` interpolation), the unary operators ``+``, ``-`` and ``not``, the
binary operators with their usual precedence, parentheses, and comma-separated,
space-separated and bracketed lists.

Example::

    >>> from sassdom.lang import scss
    >>> scss.parse_expression('$a + 1px')
    BinaryOperationExpression(operator='+', left=VariableExpression(...

"""

import collections
import functools
import logging
import pathlib
import re

import lark

from . import inner


_log = logging.getLogger(__name__)

_GRAMMAR_PATH = pathlib.Path(__file__).with_name("scss.lark")


class ParseError(ValueError):
    """Raised when the text can't be read.

    The ``offset``, ``line`` and ``column`` attributes tell where the error
    was found (line and column start at 1).

    """
    def __init__(self, message, offset, line, column):
        super().__init__("{} (line {}, column {})".format(message, line, column))
        self.offset = offset
        self.line = line
        self.column = column


@functools.lru_cache(maxsize=None)
def parser():
    """Return the (cached) Lark parser."""
    _log.debug("building parser from %s", _GRAMMAR_PATH)
    return lark.Lark(
        _GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="contextual",
        start=["interpolation", "expression"],
        maybe_placeholders=False,
    )


def parse_interpolation(text, url=None):
    """Read text with ``#{}`` interpolations into an inner Interpolation."""
    return _parse(text, url, "interpolation")


def parse_expression(text, url=None):
    """Read a SassScript expression into an inner expression node."""
    return _parse(text, url, "expression")


def _parse(text, url, start):
    source = inner.Input(text, url)
    try:
        tree = parser().parse(text, start=start)
    except lark.exceptions.UnexpectedInput as e:
        offset = e.pos_in_stream
        if offset is None or offset < 0:
            offset = len(text)
        line, column = source.location(offset)
        raise ParseError("invalid Sass {}".format(start), offset, line, column) from e
    return InnerTransformer(source).transform(tree)


_ESCAPE_RE = re.compile(r'\\(?:([0-9a-fA-F]{1,6})[ \t\n\f]?|(\r\n|[\n\r\f])|([\s\S]))')
_NUMBER_RE = re.compile(r'([+-]?(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)(.*)', re.S)


def unescape(text):
    r"""Return the text with CSS escapes resolved.

    A hexadecimal escape (``\66`` or ``\000066``) may be followed by one
    whitespace character, which is then part of the escape. An escaped
    newline disappears.

    """
    def replace(m):
        if m.group(1):
            code = int(m.group(1), 16)
            if 0 < code <= 0x10FFFF and not 0xD800 <= code <= 0xDFFF:
                return chr(code)
            return '�'
        elif m.group(2):
            return ''
        return m.group(3)
    return _ESCAPE_RE.sub(replace, text)


def parse_number(text):
    """Return a tuple(value, unit) for a NUMBER token.

    The value is an :class:`int` if the number is written without a
    fraction or exponent, otherwise a :class:`float`. The unit is None if
    there is no unit.

    """
    number, unit = _NUMBER_RE.match(text).groups()
    if number.lstrip('+-').isdigit():
        value = int(number)
    else:
        value = float(number)
    return value, unit or None


def split_variable(text):
    """Return a tuple(namespace, name) for the text of a VARIABLE token.

    Escapes are not resolved. The namespace is None if not present.

    """
    namespace, _, name = text.rpartition('$')
    return namespace[:-1] or None, name


#: A ``#{}`` hole while building an interpolation.
_Hole = collections.namedtuple("_Hole", "expression span")


def _start(item):
    """Start position of a token, hole or inner node."""
    return item.start_pos if isinstance(item, lark.Token) else item.span.start


def _end(item):
    """End position of a token, hole or inner node."""
    return item.end_pos if isinstance(item, lark.Token) else item.span.end


class InnerTransformer(lark.Transformer):
    """Transforms the Lark tree into :mod:`.inner` nodes."""
    def __init__(self, source):
        super().__init__()
        self.source = source

    def span(self, start, end):
        return inner.Span(self.source, start, end)

    def interpolation_from(self, items, start, end, decode=None):
        """Build an inner Interpolation from tokens and holes."""
        contents = []
        spans = []
        for item in items:
            if isinstance(item, _Hole):
                contents.append(item.expression)
                spans.append(item.span)
            else:
                contents.append(decode(item.value) if decode else str(item))
                spans.append(self.span(item.start_pos, item.end_pos))
        return inner.Interpolation(tuple(contents), tuple(spans), self.span(start, end))

    def interpolation(self, children):
        return self.interpolation_from(children, 0, len(self.source.text))

    def expression(self, children):
        return children[0]

    def interp(self, children):
        start, expression, end = children
        return _Hole(expression, self.span(start.start_pos, end.end_pos))

    text_interp = dq_interp = sq_interp = interp

    def quoted_string(self, children):
        open_quote, *items, close_quote = children
        text = self.interpolation_from(items, open_quote.end_pos, close_quote.start_pos, unescape)
        return inner.StringExpression(text, True, self.span(open_quote.start_pos, close_quote.end_pos))

    def unquoted_string(self, children):
        start, end = _start(children[0]), _end(children[-1])
        text = self.interpolation_from(children, start, end)
        return inner.StringExpression(text, False, self.span(start, end))

    def number(self, children):
        token, = children
        value, unit = parse_number(token.value)
        return inner.NumberExpression(value, unit, self.span(token.start_pos, token.end_pos))

    def variable(self, children):
        token, = children
        namespace, name = split_variable(token.value)
        if namespace:
            namespace = unescape(namespace)
        return inner.VariableExpression(namespace, unescape(name),
                                        self.span(token.start_pos, token.end_pos))

    def boolean(self, children):
        token, = children
        return inner.BooleanExpression(token.type == 'TRUE', self.span(token.start_pos, token.end_pos))

    def null(self, children):
        token, = children
        return inner.NullExpression(self.span(token.start_pos, token.end_pos))

    def binary_operation(self, children):
        left, operator, right = children
        return inner.BinaryOperationExpression(operator.value.strip(), left, right,
                                               self.span(_start(left), _end(right)))

    def unary_operation(self, children):
        operator, operand = children
        return inner.UnaryOperationExpression(operator.value.strip(), operand,
                                              self.span(operator.start_pos, _end(operand)))

    def parenthesized(self, children):
        open_paren, expression, close_paren = children
        return inner.ParenthesizedExpression(expression, self.span(open_paren.start_pos, close_paren.end_pos))

    def empty_list(self, children):
        open_paren, close_paren = children
        return inner.ListExpression((), None, False, self.span(open_paren.start_pos, close_paren.end_pos))

    def bracketed_list(self, children):
        open_bracket, *expression, close_bracket = children
        span = self.span(open_bracket.start_pos, close_bracket.end_pos)
        if not expression:
            return inner.ListExpression((), None, True, span)
        expression, = expression
        if (isinstance(expression, inner.ListExpression)
                and not expression.has_brackets and expression.separator is not None):
            return expression._replace(has_brackets=True, span=span)
        return inner.ListExpression((expression,), None, True, span)

    def comma_list(self, children):
        contents = tuple(c for c in children if not isinstance(c, lark.Token))
        last = children[-1]
        if isinstance(last, lark.Token):
            # a trailing comma; its whitespace belongs to the enclosing node
            end = last.start_pos + len(last.value.rstrip())
        else:
            end = _end(last)
        return inner.ListExpression(contents, ',', False, self.span(_start(contents[0]), end))

    def space_list(self, children):
        contents = tuple(c for c in children if not isinstance(c, lark.Token))
        return inner.ListExpression(contents, ' ', False,
                                    self.span(_start(contents[0]), _end(contents[-1])))
