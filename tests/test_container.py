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
Test the Container methods, and modifying a container while it is being
traversed with each().
"""

### find sassdom
import sys
sys.path.insert(0, '.')

import pytest

from sassdom.dom.expression import (
    BinaryOperationExpression, ListExpression, VariableExpression)
from sassdom.dom.interpolation import Interpolation


def visit(container, action=None):
    """Run each() on the container and return the (child, index) pairs seen.

    The action, if given, is called with the child and index before the pair
    is recorded.

    """
    seen = []
    def callback(child, index):
        if action:
            action(child, index)
        seen.append((child, index))
    container.each(callback)
    assert container._cursors == []
    return seen


def check_basics():
    v = VariableExpression('x')
    i = Interpolation(['a', v, 'a'])
    assert len(i) == 3
    assert i.nodes == ('a', v, 'a')
    assert list(i) == ['a', v, 'a']
    assert i[1] is v
    assert i.first == 'a' and i.last == 'a'
    assert 'a' in i and v in i
    assert VariableExpression('x') not in i
    assert i.index('a') == 0
    assert i.index(v) == 1
    assert i.index('b') == -1
    assert i.index(5) == 5
    assert i.every(lambda n: n)
    assert i.some(lambda n: n is v)
    assert not i.some(lambda n: n == 'b')
    assert list(i.children()) == [v]

    e = Interpolation()
    assert e.first is None and e.last is None
    assert len(e) == 0
    assert e


def check_mutations():
    i = Interpolation(['a', 'b'])
    assert i.insert_before(-5, 'x') is i
    assert i.nodes == ('x', 'a', 'b')
    i.insert_after(100, 'y')
    assert i.nodes == ('x', 'a', 'b', 'y')
    i.insert_before('b', 'q')
    assert i.nodes == ('x', 'a', 'q', 'b', 'y')
    i.insert_after('a', ['r', 's'])
    assert i.nodes == ('x', 'a', 'r', 's', 'q', 'b', 'y')
    i.insert_after(-5, 'z')
    assert i.nodes == ('z', 'x', 'a', 'r', 's', 'q', 'b', 'y')
    i.remove_child('x').remove_child(0)
    assert i.nodes == ('a', 'r', 's', 'q', 'b', 'y')
    i.prepend('p', None, ['o'])
    assert i.nodes == ('p', 'o', 'a', 'r', 's', 'q', 'b', 'y')
    i.remove_all()
    assert i.nodes == ()

    with pytest.raises(ValueError):
        i.insert_before('nope', 'x')
    with pytest.raises(ValueError):
        i.remove_child(VariableExpression('z'))
    with pytest.raises(IndexError):
        i.remove_child(10)

    l = ListExpression(' ', ['a', 'b', 'c'])
    b = l[1]
    l.replace_child(1, ['x', 'y'])
    assert l.write() == 'a x y c'
    assert b.parent is None
    assert all(n.parent is l for n in l)

    l = ListExpression(' ', ['a', 'b', 'c'])
    l.replace_child(0, l[2])
    assert l.write() == 'c b'

    l = ListExpression(' ', ['a', 'b'])
    a = l[0]
    l.replace_child(0, a)
    assert l.nodes[0] is a and a.parent is l
    assert l.write() == 'a b'
    l.replace_child(1, [l[0], 'c'])
    assert l.write() == 'a c'
    assert all(n.parent is l for n in l)

    # the operand of an operation stays where it is
    op = BinaryOperationExpression('+', {'value': 1}, {'value': 2})
    l = ListExpression(' ')
    with pytest.raises(ValueError):
        l.append(op.left)
    assert op.left.parent is op and len(l) == 0
    l.append(op.left.clone())
    assert l.write() == '1'

    l = ListExpression(',', ['b'])
    assert l.prepend('a').write() == 'a, b'
    with pytest.raises(IndexError):
        l.replace_child(5, 'c')


def check_each():
    i = Interpolation(['foo', 'bar', 'baz'])
    assert visit(i) == [('foo', 0), ('bar', 1), ('baz', 2)]

    # stop early
    assert i.each(lambda child, index: child != 'bar') is False
    assert i.each(lambda child, index: None) is None
    assert i._cursors == []

    # an exception removes the cursor as well
    with pytest.raises(ZeroDivisionError):
        i.each(lambda child, index: 1 / 0)
    assert i._cursors == []


def check_each_append():
    i = Interpolation(['foo', 'bar'])
    def action(child, index):
        if child == 'foo':
            i.append('baz')
    assert visit(i, action) == [('foo', 0), ('bar', 1), ('baz', 2)]

    l = ListExpression(',', ['a', 'b'])
    def action(child, index):
        if index == 0:
            l.append('c')
    assert [(c.write(), n) for c, n in visit(l, action)] == [('a', 0), ('b', 1), ('c', 2)]


def check_each_insert():
    i = Interpolation(['foo', 'bar', 'baz'])
    def action(child, index):
        if child == 'bar':
            i.insert_before(1, ['x', 'y', 'z'])
    assert visit(i, action) == [('foo', 0), ('bar', 1), ('baz', 5)]
    assert i.nodes == ('foo', 'x', 'y', 'z', 'bar', 'baz')

    i = Interpolation(['foo', 'bar', 'baz'])
    def action(child, index):
        if child == 'foo':
            i.insert_after(0, 'x')
    assert visit(i, action) == [('foo', 0), ('x', 1), ('bar', 2), ('baz', 3)]

    i = Interpolation(['foo', 'bar'])
    def action(child, index):
        if child == 'bar':
            i.prepend('x')
    assert visit(i, action) == [('foo', 0), ('bar', 1)]


def check_each_remove():
    i = Interpolation(['foo', 'bar', 'baz'])
    def action(child, index):
        if child == 'bar':
            i.remove_child(1)
    assert visit(i, action) == [('foo', 0), ('bar', 1), ('baz', 1)]

    i = Interpolation(['foo', 'bar', 'baz'])
    def action(child, index):
        if child == 'foo':
            i.remove_child(0)
    assert visit(i, action) == [('foo', 0), ('bar', 0), ('baz', 1)]

    i = Interpolation(['foo', 'bar', 'baz'])
    def action(child, index):
        if child == 'foo':
            i.remove_child('baz')
    assert visit(i, action) == [('foo', 0), ('bar', 1)]

    i = Interpolation(['foo', 'bar', 'baz'])
    def action(child, index):
        if child == 'foo':
            i.remove_all()
            i.append('new')
    assert visit(i, action) == [('foo', 0), ('new', 0)]

    # moving a child to another parent removes it from the traversed list
    l = ListExpression(' ', ['a', 'b', 'c'])
    other = ListExpression(' ')
    def action(child, index):
        if index == 0:
            other.append(l[1])
    assert [(c.write(), n) for c, n in visit(l, action)] == [('a', 0), ('c', 1)]
    assert other.write() == 'b'


def check_nested_each():
    i = Interpolation(['a', 'b', 'c'])
    seen = []
    def outer(child, index):
        seen.append(child)
        def inner(child2, index2):
            seen.append(child + child2)
            if child2 == 'a':
                i.remove_child(index2)
        i.each(inner)
    i.each(outer)
    assert seen == ['a', 'aa', 'ab', 'ac', 'b', 'bb', 'bc', 'c', 'cb', 'cc']
    assert i._cursors == []


def test_main():
    check_basics()
    check_mutations()
    check_each()
    check_each_append()
    check_each_insert()
    check_each_remove()
    check_nested_each()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
