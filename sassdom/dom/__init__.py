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
This module defines a DOM (Document Object Model) for Sass/SCSS source text.

The sassdom DOM is a simple tree structure where an interpolation or an
expression is represented by a node with possible child nodes.

This DOM is used in two ways:

1. Building Sass source text from scratch. This helps to create
   Sass expressions, although it in no way checks whether the result makes
   sense to a Sass compiler.

2. Converting the tree of an existing Sass source text that was read by a
   parser. The original spelling of all text is stored in the nodes (in the
   ``raws`` attributes), so it is possible to write back the text exactly,
   and to write back modifications without touching other parts of the text.

"""
