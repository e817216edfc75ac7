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
Test building and writing expression nodes by hand.
"""

### find sassdom
import sys
sys.path.insert(0, '.')

import pytest

from sassdom import registry
from sassdom.dom.convert import from_props
from sassdom.dom.expression import (
    BinaryOperationExpression, BooleanExpression, ListExpression,
    NullExpression, NumberExpression, ParenthesizedExpression,
    StringExpression, UnaryOperationExpression, VariableExpression,
)
from sassdom.dom.interpolation import Interpolation


def check_string():
    assert StringExpression('foo').write() == 'foo'
    assert StringExpression('it"s', True).write() == '"it\\"s"'
    s = StringExpression('it"s', True)
    s.raws['quotes'] = "'"
    assert s.write() == "'it\"s'"
    s = StringExpression({'nodes': ['a', {'variable_name': 'b'}]})
    assert isinstance(s.text, Interpolation)
    assert s.text.parent is s
    assert s.write() == 'a#{$b}'
    assert StringExpression(['a', VariableExpression('b')], True).write() == '"a#{$b}"'

    old = s.text
    s.text = 'new'
    assert old.parent is None
    assert s.write() == 'new'
    with pytest.raises(TypeError):
        s.text = None
    with pytest.raises(TypeError):
        StringExpression(3)


def check_number():
    assert NumberExpression(1.5, 'px').write() == '1.5px'
    assert NumberExpression(2.0).write() == '2'
    assert NumberExpression(50, '%').write() == '50%'
    assert NumberExpression(-3).write() == '-3'
    with pytest.raises(TypeError):
        NumberExpression(True)
    with pytest.raises(TypeError):
        NumberExpression('3')


def check_variable():
    assert VariableExpression('a').write() == '$a'
    assert VariableExpression('pi', 'math').write() == 'math.$pi'
    assert VariableExpression('a.b').write() == '$a\\.b'
    with pytest.raises(TypeError):
        VariableExpression('')


def check_literals():
    assert BooleanExpression(True).write() == 'true'
    assert BooleanExpression(False).write() == 'false'
    with pytest.raises(TypeError):
        BooleanExpression(1)
    assert NullExpression().write() == 'null'
    assert list(NullExpression().children()) == []


def check_operations():
    op = BinaryOperationExpression('*', {'value': 2}, VariableExpression('b'))
    assert op.write() == '2 * $b'
    op.raws['before_operator'] = ''
    op.raws['after_operator'] = ''
    assert op.write() == '2*$b'
    op.operator = '%'
    assert op.write() == '2%$b'
    with pytest.raises(ValueError):
        op.operator = '**'
    with pytest.raises(ValueError):
        BinaryOperationExpression('^', {'value': 1}, {'value': 2})

    assert UnaryOperationExpression('not', VariableExpression('a')).write() == 'not $a'
    assert UnaryOperationExpression('-', VariableExpression('a')).write() == '-$a'
    assert UnaryOperationExpression('-', NumberExpression(1)).write() == '- 1'
    assert UnaryOperationExpression('-', StringExpression('foo')).write() == '- foo'
    assert UnaryOperationExpression('+', StringExpression('x', True)).write() == '+"x"'
    u = UnaryOperationExpression('-', {'variable_name': 'a'})
    u.raws['between'] = '  '
    assert u.write() == '-  $a'
    with pytest.raises(ValueError):
        UnaryOperationExpression('*', NumberExpression(1))

    p = ParenthesizedExpression({'value': 1})
    assert p.write() == '(1)'
    p.raws['after_open'] = ' '
    assert p.write() == '( 1)'
    p.in_parens = {'variable_name': 'x'}
    assert p.write() == '( $x)'


def check_list():
    assert ListExpression(',', ['a', 'b']).write() == 'a, b'
    assert ListExpression(',', ['a']).write() == 'a,'
    assert ListExpression('/', ['a', 'b']).write() == 'a / b'
    assert ListExpression(' ', ['a', 'b'], brackets=True).write() == '[a b]'
    assert ListExpression(None).write() == '()'
    assert ListExpression(None, brackets=True).write() == '[]'
    assert ListExpression(',', ['1px 2px', '3px']).write() == '1px 2px, 3px'
    assert isinstance(ListExpression(',', ['1px 2px'])[0], ListExpression)

    l = ListExpression(',', ['a', 'b'])
    l.raws['trailing_comma'] = True
    assert l.write() == 'a, b,'
    l.separator = ' '
    assert l.write() == 'a b'
    with pytest.raises(ValueError):
        l.separator = ';'
    with pytest.raises(ValueError):
        ListExpression('x')
    with pytest.raises(TypeError):
        ListExpression(' ', [3])


def check_from_props():
    n = from_props({'sass_type': 'number', 'value': 3})
    assert isinstance(n, NumberExpression) and n.value == 3
    assert isinstance(from_props({'value': True}), BooleanExpression)
    assert isinstance(from_props({'value': None}), NullExpression)
    assert isinstance(from_props({'value': 1.5, 'unit': 'em'}), NumberExpression)
    assert from_props({'text': 'a', 'quotes': True}).write() == '"a"'
    assert from_props({'variable_name': 'a', 'namespace': 'ns'}).write() == 'ns.$a'
    assert from_props({'operator': '-', 'operand': {'value': 1}}).write() == '- 1'
    assert from_props({'operator': '==', 'left': {'value': 1}, 'right': {'value': 2}}).write() == '1 == 2'
    assert from_props({'in_parens': {'value': 1}}).write() == '(1)'
    assert from_props({'separator': ',', 'nodes': ['a', {'value': 1}]}).write() == 'a, 1'
    assert from_props({'sass_type': 'null'}).write() == 'null'

    props = {'sass_type': 'boolean', 'value': False}
    from_props(props)
    assert props == {'sass_type': 'boolean', 'value': False}

    with pytest.raises(ValueError):
        from_props({'foo': 1})
    with pytest.raises(ValueError):
        from_props({'sass_type': 'bogus'})
    with pytest.raises(ValueError):
        from_props({'sass_type': 'interpolation'})
    with pytest.raises(TypeError):
        from_props({'value': 1, 'foo': 2})


def check_registry():
    assert registry.find('list') is ListExpression
    assert registry.find('interpolation') is Interpolation
    assert registry.find('bogus') is None
    with pytest.raises(ValueError):
        @registry.register
        class Duplicate(NullExpression):
            __slots__ = ()
            sass_type = 'null'


def test_main():
    check_string()
    check_number()
    check_variable()
    check_literals()
    check_operations()
    check_list()
    check_from_props()
    check_registry()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
