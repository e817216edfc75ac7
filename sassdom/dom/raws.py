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
Pairing of a value with the text it was read from.

Wherever a node can write the same value in more than one way (escapes in
names, the spelling of a number, quoted text), the original spelling is
stored in its ``raws`` as a :class:`RawWithValue`, together with the value
it denotes. When the node is written, the raw text is used as long as the
node still has that value; otherwise the text is generated again.

"""

import collections


#: The original spelling ``raw`` of a ``value``.
RawWithValue = collections.namedtuple("RawWithValue", "raw value")
RawWithValue.raw.__doc__ = "The text as it appeared in the source."
RawWithValue.value.__doc__ = "The value the raw text denotes."


def choose(raw, value, regenerate=str):
    """Return the raw text to write for ``value``.

    If ``raw`` is a :class:`RawWithValue` for the same value, its raw text is
    returned; otherwise ``regenerate(value)`` is returned. A ``raw`` of None
    is allowed.

    """
    if raw is not None and raw.value == value:
        return raw.raw
    return regenerate(value)


def raw_at(raws, index):
    """Return the item of the ``raws`` list at ``index``, or None.

    The ``raws`` may be None or shorter than ``index``.

    """
    if raws and 0 <= index < len(raws):
        return raws[index]
