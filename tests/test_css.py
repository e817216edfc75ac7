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
Test converting tinycss2 component values to expressions.
"""

### find sassdom
import sys
sys.path.insert(0, '.')

import tinycss2

from sassdom.dom import read
from sassdom.dom.convert import from_css
from sassdom.dom.expression import ListExpression, NumberExpression, StringExpression


def check_list():
    tokens = tinycss2.parse_component_value_list('foo 1.50px 50% "x\\79 z" [a, b c] (1) (a b) ()')
    l = ListExpression(' ', tokens)
    assert [type(n).__name__ for n in l] == [
        'StringExpression', 'NumberExpression', 'NumberExpression',
        'StringExpression', 'ListExpression', 'ParenthesizedExpression',
        'ParenthesizedExpression', 'ListExpression',
    ]
    assert l.write() == 'foo 1.50px 50% "xyz" [a, b c] (1) (a b) ()'
    assert l[1].value == 1.5 and l[1].unit == 'px'
    assert l[2].value == 50 and l[2].unit == '%'
    assert l[3].quotes and l[3].text.as_plain == 'xyz'
    assert l[4].brackets and l[4].separator == ','
    assert l[4][1].separator == ' '
    assert l[6].in_parens.separator == ' '

    # the number keeps its spelling until changed
    l[1].value = 2
    assert l[1].write() == '2px'

    l = ListExpression(',', tinycss2.parse_component_value_list('a, b /* c */, 3'))
    assert len(l) == 3
    assert l.write() == 'a, b, 3'


def check_tokens():
    assert from_css(tinycss2.parse_one_component_value('#fff')).write() == '#fff'
    s = from_css(tinycss2.parse_one_component_value("'it\"s'"))
    assert isinstance(s, StringExpression)
    assert s.text.as_plain == 'it"s'
    assert s.write() == '"it\\"s"'
    n = from_css(tinycss2.parse_one_component_value('007'))
    assert isinstance(n, NumberExpression)
    assert n.value == 7 and n.write() == '007'

    op = read.expression('$a + 1')
    op.right = tinycss2.parse_one_component_value('2em')
    assert op.write() == '$a + 2em'
    assert op.right.parent is op


def test_main():
    check_list()
    check_tokens()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
