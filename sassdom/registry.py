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
Registry of the node types defined in :mod:`sassdom`.

Every node class has a ``sass_type`` attribute with a unique name. Node
classes register themselves with the :func:`register` decorator, so the
class can be found back by that name, e.g. when building a node from a
dictionary with a ``sass_type`` key.

"""

__all__ = ['find', 'register']


registry = {}


def find(sass_type):
    """Return the node class registered for ``sass_type``, or None."""
    return registry.get(sass_type)


def register(cls):
    """Register a node class under its ``sass_type``. Returns the class,
    so this can be used as a class decorator.

    """
    if cls.sass_type in registry:
        raise ValueError("sass_type already registered: {}".format(cls.sass_type))
    registry[cls.sass_type] = cls
    return cls
