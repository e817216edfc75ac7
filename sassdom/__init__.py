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
The sassdom module.

Reads Sass interpolations and SassScript expressions into an editable tree
that writes back its original text wherever it was left untouched.

"""

import logging

from .pkginfo import version, version_string


__all__ = ('load', 'version', 'version_string')


logging.getLogger(__name__).addHandler(logging.NullHandler())


def load(filename, encoding=None, errors=None, newline=None, with_origin=True):
    """Convenience function to read text from ``filename`` and return a
    :class:`~.dom.interpolation.Interpolation`.

    The whole file is read as text with embedded ``#{}`` expressions. If
    ``with_origin`` is True (the default), the nodes know their position
    in the file.

    The ``encoding``, ``errors`` and ``newline`` arguments will be passed to
    Python's :func:`open` function. Raises :class:`OSError` if the file can't
    be read.

    """
    from .dom import read
    with open(filename, encoding=encoding, errors=errors, newline=newline) as f:
        text = f.read()
    return read.interpolation(text, with_origin, url=filename)
