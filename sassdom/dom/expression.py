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
The SassScript expression nodes.

Every expression type has a ``sass_type`` and can be built by hand::

    >>> from sassdom.dom.expression import *
    >>> e = BinaryOperationExpression('+', VariableExpression('a'), NumberExpression(1, 'px'))
    >>> e.write()
    '$a + 1px'

Child expressions can also be given as a dictionary, which is turned into an
expression by :func:`~.convert.from_props`::

    >>> BinaryOperationExpression('*', {'value': 2}, {'variable_name': 'b'}).write()
    '2 * $b'

Expressions read from a text keep their original spelling and whitespace in
their ``raws``, and write it back unless the value was changed.

"""

import numbers

import tinycss2.ast

from .. import registry
from ..node import ChildSlot, Node
from .container import Container
from .interpolation import Interpolation
from .raws import RawWithValue, choose, raw_at
from .util import DEFAULT_QUOTE, escape_quoted, format_number, split_whitespace, to_css_identifier


#: The binary operators, from low to high precedence.
OPERATORS = ('or', 'and', '==', '!=', '<', '<=', '>', '>=', '+', '-', '*', '/', '%')

#: The unary operators.
UNARY_OPERATORS = ('+', '-', '/', 'not')

#: The list separators (None for a list with zero or one element).
SEPARATORS = (',', '/', ' ', None)


def _expression(value):
    """Return an Expression for a child slot."""
    if isinstance(value, Expression):
        return value
    from .convert import expression_from
    return expression_from(value)


def _interpolation(value):
    """Return an Interpolation for a text slot."""
    if isinstance(value, Interpolation):
        return value
    elif isinstance(value, dict):
        return Interpolation(**value)
    elif isinstance(value, (str, list, tuple)):
        return Interpolation(value)
    raise TypeError("invalid text for an Interpolation: {!r}".format(value))


class Expression(Node):
    """Base class for all expression nodes."""
    __slots__ = ()


@registry.register
class StringExpression(Expression):
    """A quoted or unquoted string.

    The ``text`` is an :class:`~.interpolation.Interpolation`; a string, list
    or dictionary is turned into one. If ``quotes`` is True, the text is
    written between quotes, by default ``"``; ``raws['quotes']`` can
    set another quote character.

    Escapes in an unquoted string are kept literally in the text.

    """
    __slots__ = ('_text', 'quotes')

    sass_type = 'string'
    _clone_fields = ('text', 'quotes', 'raws')
    _json_fields = ('text', 'quotes')

    text = ChildSlot(_interpolation)

    def __init__(self, text, quotes=False, raws=None):
        super().__init__(raws)
        self.text = text
        self.quotes = quotes

    @classmethod
    def read_origin(cls, origin, with_origin=False):
        from .convert import convert_interpolation
        node = cls(convert_interpolation(origin.text, with_origin), origin.has_quotes)
        if origin.has_quotes:
            node.raws['quotes'] = origin.span.text[0]
        return node

    def body_equals(self, other):
        return self.quotes == other.quotes

    def write(self):
        if not self.quotes:
            return self.text.write()
        quote = self.raws.get('quotes', DEFAULT_QUOTE)
        return quote + self.text.write_with(lambda text: escape_quoted(text, quote)) + quote


@registry.register
class NumberExpression(Expression):
    """A number with an optional unit (or ``'%'``).

    ``raws['value']`` is a :class:`~.raws.RawWithValue` with the original
    spelling of the number.

    """
    __slots__ = ('value', 'unit')

    sass_type = 'number'
    _clone_fields = ('value', 'unit', 'raws')
    _json_fields = ('value', 'unit')

    def __init__(self, value, unit=None, raws=None):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError("invalid value for {}: {!r}".format(type(self).__name__, value))
        super().__init__(raws)
        self.value = value
        self.unit = unit

    @classmethod
    def read_origin(cls, origin, with_origin=False):
        node = cls(origin.value, origin.unit)
        text = origin.span.text
        raw = text[:len(text) - len(origin.unit)] if origin.unit else text
        if raw != format_number(origin.value):
            node.raws['value'] = RawWithValue(raw, origin.value)
        return node

    def body_equals(self, other):
        return self.value == other.value and self.unit == other.unit

    def write(self):
        return choose(self.raws.get('value'), self.value, format_number) + (self.unit or '')


@registry.register
class VariableExpression(Expression):
    """A variable reference, like ``$name`` or ``namespace.$name``.

    ``raws['variable_name']`` and ``raws['namespace']`` are
    :class:`~.raws.RawWithValue` instances with the original spelling, if it
    had escapes.

    """
    __slots__ = ('variable_name', 'namespace')

    sass_type = 'variable'
    _clone_fields = ('variable_name', 'namespace', 'raws')
    _json_fields = ('variable_name', 'namespace')

    def __init__(self, variable_name, namespace=None, raws=None):
        if not isinstance(variable_name, str) or not variable_name:
            raise TypeError("invalid variable_name for {}: {!r}".format(type(self).__name__, variable_name))
        super().__init__(raws)
        self.variable_name = variable_name
        self.namespace = namespace

    @classmethod
    def read_origin(cls, origin, with_origin=False):
        from ..lang.scss import split_variable
        node = cls(origin.name, origin.namespace)
        raw_namespace, raw_name = split_variable(origin.span.text)
        if raw_name != to_css_identifier(origin.name):
            node.raws['variable_name'] = RawWithValue(raw_name, origin.name)
        if origin.namespace and raw_namespace != to_css_identifier(origin.namespace):
            node.raws['namespace'] = RawWithValue(raw_namespace, origin.namespace)
        return node

    def body_equals(self, other):
        return self.variable_name == other.variable_name and self.namespace == other.namespace

    def write(self):
        result = '$' + choose(self.raws.get('variable_name'), self.variable_name, to_css_identifier)
        if self.namespace:
            result = choose(self.raws.get('namespace'), self.namespace, to_css_identifier) + '.' + result
        return result


@registry.register
class BooleanExpression(Expression):
    """The value ``true`` or ``false``."""
    __slots__ = ('value',)

    sass_type = 'boolean'
    _clone_fields = ('value', 'raws')
    _json_fields = ('value',)

    def __init__(self, value, raws=None):
        if not isinstance(value, bool):
            raise TypeError("invalid value for {}: {!r}".format(type(self).__name__, value))
        super().__init__(raws)
        self.value = value

    @classmethod
    def read_origin(cls, origin, with_origin=False):
        return cls(origin.value)

    def body_equals(self, other):
        return self.value == other.value

    def write(self):
        return 'true' if self.value else 'false'


@registry.register
class NullExpression(Expression):
    """The value ``null``."""
    __slots__ = ()

    sass_type = 'null'

    @classmethod
    def read_origin(cls, origin, with_origin=False):
        return cls()

    def write(self):
        return 'null'


@registry.register
class BinaryOperationExpression(Expression):
    """An operation with two operands.

    ``raws['before_operator']`` and ``raws['after_operator']`` are the
    whitespace around the operator, by default one space.

    """
    __slots__ = ('_operator', '_left', '_right')

    sass_type = 'binary-operation'
    _clone_fields = ('operator', 'left', 'right', 'raws')
    _json_fields = ('operator', 'left', 'right')

    left = ChildSlot(_expression)
    right = ChildSlot(_expression)

    def __init__(self, operator, left, right, raws=None):
        super().__init__(raws)
        self.operator = operator
        self.left = left
        self.right = right

    @property
    def operator(self):
        """The operator, one of :data:`OPERATORS`."""
        return self._operator

    @operator.setter
    def operator(self, operator):
        if operator not in OPERATORS:
            raise ValueError("invalid operator for {}: {!r}".format(type(self).__name__, operator))
        self._operator = operator

    @classmethod
    def read_origin(cls, origin, with_origin=False):
        from .convert import convert_expression
        node = cls(origin.operator,
                   convert_expression(origin.left, with_origin),
                   convert_expression(origin.right, with_origin))
        text = origin.span.input.text[origin.left.span.end:origin.right.span.start]
        before, operator, after = split_whitespace(text)
        node.raws['before_operator'] = before
        node.raws['after_operator'] = after
        return node

    def repr_body(self):
        return repr(self.operator)

    def body_equals(self, other):
        return self.operator == other.operator

    def write(self):
        return ''.join((
            self.left.write(),
            self.raws.get('before_operator', ' '),
            self.operator,
            self.raws.get('after_operator', ' '),
            self.right.write(),
        ))


@registry.register
class UnaryOperationExpression(Expression):
    """An operation with one operand.

    ``raws['between']`` is the whitespace between the operator and the
    operand. If not set, a space is written after ``not``, before numbers
    and between ``-`` and an unquoted string.

    """
    __slots__ = ('_operator', '_operand')

    sass_type = 'unary-operation'
    _clone_fields = ('operator', 'operand', 'raws')
    _json_fields = ('operator', 'operand')

    operand = ChildSlot(_expression)

    def __init__(self, operator, operand, raws=None):
        super().__init__(raws)
        self.operator = operator
        self.operand = operand

    @property
    def operator(self):
        """The operator, one of :data:`UNARY_OPERATORS`."""
        return self._operator

    @operator.setter
    def operator(self, operator):
        if operator not in UNARY_OPERATORS:
            raise ValueError("invalid operator for {}: {!r}".format(type(self).__name__, operator))
        self._operator = operator

    @classmethod
    def read_origin(cls, origin, with_origin=False):
        from .convert import convert_expression
        node = cls(origin.operator, convert_expression(origin.operand, with_origin))
        text = origin.span.input.text
        node.raws['between'] = text[origin.span.start + len(origin.operator):origin.operand.span.start]
        return node

    def repr_body(self):
        return repr(self.operator)

    def body_equals(self, other):
        return self.operator == other.operator

    def write(self):
        between = self.raws.get('between')
        if between is None:
            operand = self.operand
            if (self.operator == 'not'
                    or (self.operator == '-' and isinstance(operand, StringExpression) and not operand.quotes)
                    or isinstance(operand, NumberExpression)):
                between = ' '
            else:
                between = ''
        return self.operator + between + self.operand.write()


@registry.register
class ParenthesizedExpression(Expression):
    """An expression between parentheses.

    ``raws['after_open']`` and ``raws['before_close']`` are the whitespace
    inside the parentheses.

    """
    __slots__ = ('_in_parens',)

    sass_type = 'parenthesized'
    _clone_fields = ('in_parens', 'raws')
    _json_fields = ('in_parens',)

    in_parens = ChildSlot(_expression)

    def __init__(self, in_parens, raws=None):
        super().__init__(raws)
        self.in_parens = in_parens

    @classmethod
    def read_origin(cls, origin, with_origin=False):
        from .convert import convert_expression
        node = cls(convert_expression(origin.expression, with_origin))
        text = origin.span.input.text
        node.raws['after_open'] = text[origin.span.start+1:origin.expression.span.start]
        node.raws['before_close'] = text[origin.expression.span.end:origin.span.end-1]
        return node

    def write(self):
        return ''.join((
            '(',
            self.raws.get('after_open', ''),
            self.in_parens.write(),
            self.raws.get('before_close', ''),
            ')',
        ))


def _is_css_separator(node):
    """Return True for tinycss2 whitespace, comments and commas."""
    return isinstance(node, (tinycss2.ast.WhitespaceToken, tinycss2.ast.Comment)) or \
        (isinstance(node, tinycss2.ast.LiteralToken) and node.value == ',')


@registry.register
class ListExpression(Container, Expression):
    """A list of expressions.

    The ``separator`` is one of :data:`SEPARATORS`. If ``brackets`` is
    True, the list is written between square brackets; an empty list
    without brackets is written as ``()``.

    When adding children, a string is read as an expression (see
    :func:`~.read.expression`), a dictionary is turned into an expression,
    and :mod:`tinycss2` component values are converted (whitespace, comments
    and commas among them are skipped).

    The ``raws`` can contain:

    ``'after_open'``, ``'before_close'``
        whitespace inside the brackets or parentheses

    ``'trailing_comma'``
        True if a comma-separated list ends with a comma

    ``'expressions'``
        a list with for every child a dict with the ``'before'`` and
        ``'after'`` whitespace around it (a separator comes after the
        ``'after'`` whitespace)

    """
    __slots__ = ('_nodes', '_cursors', '_separator', 'brackets')

    sass_type = 'list'
    _clone_fields = ('separator', 'nodes', 'brackets', 'raws')
    _json_fields = ('separator', 'nodes', 'brackets')

    def __init__(self, separator, nodes=None, brackets=False, raws=None):
        super().__init__(raws)
        self._init_container()
        self.separator = separator
        self.brackets = brackets
        if nodes is not None:
            self.append(nodes)

    @property
    def separator(self):
        """The separator, one of :data:`SEPARATORS`."""
        return self._separator

    @separator.setter
    def separator(self, separator):
        if separator not in SEPARATORS:
            raise ValueError("invalid separator for {}: {!r}".format(type(self).__name__, separator))
        self._separator = separator

    @classmethod
    def read_origin(cls, origin, with_origin=False):
        from .convert import convert_expression
        node = cls(origin.separator, brackets=origin.has_brackets)
        text = origin.span.input.text
        start, end = origin.span.start, origin.span.end
        if origin.has_brackets:
            end -= 1
        contents = origin.contents
        if not contents:
            node.raws['after_open'] = text[start+1:end if origin.has_brackets else end-1]
            return node
        for item in contents:
            node.push(convert_expression(item, with_origin))
        expressions = [{'before': '', 'after': ''} for item in contents]
        for i, (a, b) in enumerate(zip(contents, contents[1:])):
            gap = text[a.span.end:b.span.start]
            k = gap.find(origin.separator) if origin.separator in (',', '/') else -1
            if k == -1:
                expressions[i]['after'] = gap
            else:
                expressions[i]['after'] = gap[:k]
                expressions[i+1]['before'] = gap[k+1:]
        rest = text[contents[-1].span.end:end]
        k = rest.find(',') if origin.separator == ',' else -1
        if k != -1:
            node.raws['trailing_comma'] = True
            expressions[-1]['after'] = rest[:k]
            rest = rest[k+1:]
        if origin.has_brackets:
            node.raws['after_open'] = text[start+1:contents[0].span.start]
            node.raws['before_close'] = rest
        node.raws['expressions'] = expressions
        return node

    def _normalize(self, item):
        if isinstance(item, Expression):
            yield self.adopt(item)
        elif isinstance(item, dict):
            from .convert import from_props
            yield self.adopt(from_props(item))
        elif isinstance(item, str):
            text = item.strip()
            if text:
                from . import read
                yield self.adopt(read.expression(text))
        elif isinstance(item, tinycss2.ast.Node):
            if not _is_css_separator(item):
                from .convert import from_css
                yield self.adopt(from_css(item))
        else:
            raise TypeError("invalid child for {}: {!r}".format(type(self).__name__, item))

    def body_equals(self, other):
        return self.separator == other.separator and self.brackets == other.brackets

    def write(self):
        parens = self.brackets or not self._nodes
        result = []
        if parens:
            result.append('[' if self.brackets else '(')
            result.append(self.raws.get('after_open', ''))
        expression_raws = self.raws.get('expressions')
        last = len(self._nodes) - 1
        for i, node in enumerate(self._nodes):
            raw = raw_at(expression_raws, i) or {}
            before = raw.get('before')
            if before is None:
                before = ' ' if i > 0 and self.separator in (',', '/') else ''
            after = raw.get('after')
            if after is None:
                after = ' ' if i < last and self.separator != ',' else ''
            result.append(before + node.write() + after)
            if i < last and self.separator not in (' ', None):
                result.append(self.separator)
        if self.separator == ',' and (len(self._nodes) < 2 or self.raws.get('trailing_comma')):
            result.append(',')
        if parens:
            result.append(self.raws.get('before_close', ''))
            result.append(']' if self.brackets else ')')
        return ''.join(result)
