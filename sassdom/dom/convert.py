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
Conversion of other trees into sassdom nodes.

There are three ways in:

* :func:`convert_expression` and :func:`convert_interpolation` walk the
  read-only tree produced by :mod:`sassdom.lang.scss` once, and store the
  whitespace and original spelling found between the spans in the ``raws``
  of the new nodes;

* :func:`from_props` builds an expression from a dictionary of properties,
  like ``{'variable_name': 'a'}`` or ``{'sass_type': 'number', 'value': 3}``;

* :func:`from_css` converts a component value parsed by :mod:`tinycss2`.

"""

import tinycss2.ast

from .. import registry
from ..lang import inner
from . import expression
from .interpolation import Interpolation
from .raws import RawWithValue
from .source import LazySource


_EXPRESSIONS = {
    inner.StringExpression: expression.StringExpression,
    inner.NumberExpression: expression.NumberExpression,
    inner.VariableExpression: expression.VariableExpression,
    inner.BooleanExpression: expression.BooleanExpression,
    inner.NullExpression: expression.NullExpression,
    inner.BinaryOperationExpression: expression.BinaryOperationExpression,
    inner.UnaryOperationExpression: expression.UnaryOperationExpression,
    inner.ParenthesizedExpression: expression.ParenthesizedExpression,
    inner.ListExpression: expression.ListExpression,
}


def convert_expression(origin, with_origin=False):
    """Return an Expression node for an inner expression.

    If ``with_origin`` is True, every node gets a
    :class:`~.source.LazySource` pointing to the text it was read from.

    """
    try:
        cls = _EXPRESSIONS[type(origin)]
    except KeyError:
        raise TypeError("can't convert {}".format(type(origin).__name__)) from None
    node = cls.read_origin(origin, with_origin)
    if with_origin:
        node.source = LazySource(origin.span)
    return node


def convert_interpolation(origin, with_origin=False):
    """Return an :class:`~.interpolation.Interpolation` for an inner
    interpolation.

    """
    node = Interpolation.read_origin(origin, with_origin)
    if with_origin:
        node.source = LazySource(origin.span)
    return node


def expression_from(value):
    """Return an Expression for a dictionary or a :mod:`tinycss2` node.

    Raises TypeError for other values.

    """
    if isinstance(value, expression.Expression):
        return value
    elif isinstance(value, dict):
        return from_props(value)
    elif isinstance(value, tinycss2.ast.Node):
        return from_css(value)
    raise TypeError("invalid value for an Expression: {!r}".format(value))


def _guess_type(props):
    """Return the Expression class for a properties dictionary without a
    ``sass_type``, or None.

    """
    if 'text' in props:
        return expression.StringExpression
    elif 'variable_name' in props:
        return expression.VariableExpression
    elif 'operand' in props:
        return expression.UnaryOperationExpression
    elif 'left' in props or 'right' in props:
        return expression.BinaryOperationExpression
    elif 'in_parens' in props:
        return expression.ParenthesizedExpression
    elif 'separator' in props or 'nodes' in props:
        return expression.ListExpression
    elif 'value' in props:
        value = props['value']
        if isinstance(value, bool):
            return expression.BooleanExpression
        elif value is None:
            return expression.NullExpression
        return expression.NumberExpression


def from_props(props):
    """Return a new Expression built from the properties dictionary.

    A ``'sass_type'`` key selects the node type; otherwise it is guessed
    from the keys. The other keys are given to the constructor. Raises
    ValueError if no expression type can be found.

    """
    props = dict(props)
    sass_type = props.pop('sass_type', None)
    if sass_type is not None:
        cls = registry.find(sass_type)
        if cls is None or not issubclass(cls, expression.Expression):
            raise ValueError("unknown expression sass_type: {!r}".format(sass_type))
    else:
        cls = _guess_type(props)
        if cls is None:
            raise ValueError("can't determine the expression for: {!r}".format(props))
    if cls is expression.NullExpression:
        props.pop('value', None)
    return cls(**props)


def _css_number(node):
    """Return a NumberExpression for a numeric tinycss2 token."""
    value = node.int_value if node.is_integer else node.value
    if isinstance(node, tinycss2.ast.PercentageToken):
        unit = '%'
    elif isinstance(node, tinycss2.ast.DimensionToken):
        unit = node.unit
    else:
        unit = None
    number = expression.NumberExpression(value, unit)
    number.raws['value'] = RawWithValue(node.representation, value)
    return number


def _css_items(content):
    """Return the content of a tinycss2 block without whitespace and comments."""
    return [n for n in content
            if not isinstance(n, (tinycss2.ast.WhitespaceToken, tinycss2.ast.Comment))]


def _css_list(content, brackets):
    """Return a ListExpression for the contents of a tinycss2 block.

    Commas separate the items; items consisting of more than one component
    value become space-separated lists.

    """
    groups = [[]]
    for n in _css_items(content):
        if isinstance(n, tinycss2.ast.LiteralToken) and n.value == ',':
            groups.append([])
        else:
            groups[-1].append(n)
    if len(groups) > 1:
        items = [expression.ListExpression(' ', group) if len(group) > 1 else group
                 for group in groups if group]
        return expression.ListExpression(',', items, brackets)
    items, = groups
    return expression.ListExpression(' ' if len(items) > 1 else None, items, brackets)


def from_css(node):
    """Return a new Expression for a :mod:`tinycss2` component value.

    Identifiers become unquoted strings, strings quoted strings, numbers,
    percentages and dimensions numbers (keeping their spelling; tinycss2
    does not keep the spelling of strings), ``[]``
    blocks bracketed lists and ``()`` blocks parenthesized expressions.
    Everything else becomes an unquoted string with the serialized text.

    """
    if isinstance(node, tinycss2.ast.IdentToken):
        return expression.StringExpression(node.serialize())
    elif isinstance(node, tinycss2.ast.StringToken):
        quote = node.representation[0]
        raw = node.representation[1:]
        if raw.endswith(quote):
            raw = raw[:-1]
        text = Interpolation(node.value)
        if raw != node.value:
            text.raws['text'] = [RawWithValue(raw, node.value)]
        string = expression.StringExpression(text, True)
        string.raws['quotes'] = quote
        return string
    elif isinstance(node, (tinycss2.ast.NumberToken,
                           tinycss2.ast.PercentageToken,
                           tinycss2.ast.DimensionToken)):
        return _css_number(node)
    elif isinstance(node, tinycss2.ast.SquareBracketsBlock):
        return _css_list(node.content, True)
    elif isinstance(node, tinycss2.ast.ParenthesesBlock):
        items = _css_items(node.content)
        if not items:
            return expression.ListExpression(None)
        elif len(items) == 1:
            return expression.ParenthesizedExpression(from_css(items[0]))
        return expression.ParenthesizedExpression(_css_list(node.content, False))
    return expression.StringExpression(node.serialize())
