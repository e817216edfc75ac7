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
Some utility functions.
"""

import string


DEFAULT_QUOTE = '"'

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + '_-')
_WHITESPACE = ' \t\n\r\f'


def split_whitespace(text):
    r"""Return a tuple(``before``, ``text``, ``after``), where ``before`` and
    ``after`` are the whitespace at the start and the end of the text.

    For example::

        >>> split_whitespace('  + \n')
        ('  ', '+', ' \n')

    If the text only consists of whitespace, it is all returned in
    ``before``.

    """
    stripped = text.lstrip(_WHITESPACE)
    before = text[:len(text) - len(stripped)]
    middle = stripped.rstrip(_WHITESPACE)
    return before, middle, stripped[len(middle):]


def _hex_escape(char):
    """Return a hexadecimal escape for the character, with a trailing space."""
    return '\\{:x} '.format(ord(char))


def to_css_identifier(text):
    r"""Return the text escaped so that it can be written as a CSS
    identifier.

    Characters that are not allowed in an identifier are escaped with a
    backslash, unprintable characters and digits at the start with a
    hexadecimal escape::

        >>> to_css_identifier('a.b')
        'a\\.b'
        >>> to_css_identifier('1st')
        '\\31 st'

    """
    result = []
    for i, c in enumerate(text):
        if c in _NAME_CHARS or ord(c) >= 0x80:
            if c.isdigit() and (i == 0 or (i == 1 and text[0] == '-')):
                result.append(_hex_escape(c))
            else:
                result.append(c)
        elif c.isprintable() and not c.isspace():
            result.append('\\' + c)
        else:
            result.append(_hex_escape(c))
    return ''.join(result)


def escape_quoted(text, quote=DEFAULT_QUOTE):
    r"""Return the text escaped to be written between the specified quotes.

    The quote character and backslashes are escaped with a backslash,
    newlines and other unprintable ASCII characters with a hexadecimal
    escape::

        >>> escape_quoted('say "hi"\n')
        'say \\"hi\\"\\a '

    """
    result = []
    for c in text:
        if c == quote or c == '\\':
            result.append('\\' + c)
        elif c < ' ' or c == '\x7f':
            result.append(_hex_escape(c))
        else:
            result.append(c)
    return ''.join(result)


def format_number(value):
    """Return the shortest text for a number value.

    Floats that are whole numbers are written without a fraction.

    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)
