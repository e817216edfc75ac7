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
The :class:`Interpolation` node: text with embedded expressions.

An interpolation is a container whose children are plain strings and
:class:`~.expression.Expression` nodes. Written out, every expression is
wrapped in ``#{`` and ``}``::

    >>> from sassdom.dom.interpolation import Interpolation
    >>> from sassdom.dom.expression import VariableExpression
    >>> i = Interpolation(['width-', VariableExpression('size')])
    >>> i.write()
    'width-#{$size}'

An interpolation read from a text stores the original spelling of the text
(if it differs from the text value) and the whitespace inside ``#{}`` in its
``raws``::

    raws['text'][i]         a RawWithValue for the string at index i
    raws['expressions'][i]  a dict with 'before' and 'after' whitespace for
                            the expression at index i

These lists are indexed by child position; both are optional, and so are
their items.

Adjacent strings are never merged.

"""

import tinycss2.ast

from .. import registry
from ..node import Node
from .container import Container
from .raws import RawWithValue, choose, raw_at


@registry.register
class Interpolation(Container, Node):
    """Text with ``#{}`` holes.

    The ``nodes`` can be a string (a single piece of text, ``#{`` is not
    interpreted), or anything :meth:`append` accepts.

    When adding children:

    * a string is added as text, but empty strings are skipped;
    * an :class:`~.expression.Expression` is added and adopted;
    * a dictionary is turned into an Expression
      (see :func:`~.convert.from_props`);
    * another Interpolation is drained: its children are moved here and it
      is left empty;
    * a :mod:`tinycss2` node is added as its serialized text;
    * lists and tuples are flattened and None is skipped.

    """
    __slots__ = ('_nodes', '_cursors')

    sass_type = 'interpolation'
    _clone_fields = ('nodes', 'raws')
    _json_fields = ('nodes',)

    def __init__(self, nodes=None, raws=None):
        super().__init__(raws)
        self._init_container()
        if nodes is not None:
            self.append(nodes)

    @classmethod
    def read_origin(cls, origin, with_origin=False):
        """Build an Interpolation from an inner interpolation."""
        from .convert import convert_expression
        node = cls()
        text_raws = []
        expression_raws = []
        for item, span in zip(origin.contents, origin.spans):
            if isinstance(item, str):
                raw = span.text
                text_raws.append(RawWithValue(raw, item) if raw != item else None)
                expression_raws.append(None)
                node.push(item)
            else:
                text = span.input.text
                before = text[span.start+2:item.span.start]
                after = text[item.span.end:span.end-1]
                expression_raws.append({'before': before, 'after': after} if before or after else None)
                text_raws.append(None)
                node.push(convert_expression(item, with_origin))
        if any(text_raws):
            node.raws['text'] = text_raws
        if any(expression_raws):
            node.raws['expressions'] = expression_raws
        return node

    def _normalize(self, item):
        from .expression import Expression
        if isinstance(item, str):
            if item:
                yield item
        elif isinstance(item, Expression):
            yield self.adopt(item)
        elif isinstance(item, Interpolation):
            if item is self:
                raise ValueError("can't add an Interpolation to itself")
            children = item.nodes
            item.remove_all()
            for child in children:
                yield self.adopt(child) if isinstance(child, Node) else child
        elif isinstance(item, dict):
            from .convert import from_props
            yield self.adopt(from_props(item))
        elif isinstance(item, tinycss2.ast.Node):
            text = item.serialize()
            if text:
                yield text
        else:
            raise TypeError("invalid child for {}: {!r}".format(type(self).__name__, item))

    @property
    def is_plain(self):
        """True if there are no expressions, only text."""
        return not any(isinstance(n, Node) for n in self._nodes)

    @property
    def as_plain(self):
        """The joined text if there are no expressions, otherwise None."""
        if self.is_plain:
            return ''.join(self._nodes)

    def body_equals(self, other):
        """Compares the text, called by :meth:`~sassdom.node.Node.equals`."""
        texts = [n if isinstance(n, str) else None for n in self._nodes]
        return texts == [n if isinstance(n, str) else None for n in other._nodes]

    def write_with(self, regenerate):
        """Return the text, with ``regenerate(text)`` used for strings whose
        raw spelling is not present or not valid anymore.

        """
        text_raws = self.raws.get('text')
        expression_raws = self.raws.get('expressions')
        result = []
        for i, node in enumerate(self._nodes):
            if isinstance(node, str):
                result.append(choose(raw_at(text_raws, i), node, regenerate))
            else:
                raw = raw_at(expression_raws, i) or {}
                result.append('#{' + raw.get('before', '') + node.write() + raw.get('after', '') + '}')
        return ''.join(result)

    def write(self):
        """Return the text with ``#{}`` around the expressions."""
        return self.write_with(str)
