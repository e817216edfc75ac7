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
The :class:`Container` mixin, for nodes that own an ordered sequence of
children.

A container can be modified while it is being traversed with
:meth:`~Container.each`, even by nested traversals of the same container.
Every active traversal registers a cursor with the container, and every
insertion or removal adjusts the registered cursors, so that each child is
visited exactly once, and children appended during a traversal are visited
as well.

The elements of a container are mostly nodes, but a container may also hold
plain strings (an :class:`~.interpolation.Interpolation` does). Strings have
no parent.

"""

from ..node import Node


class _Cursor:
    """The position of one active :meth:`Container.each` traversal."""
    __slots__ = ('index',)

    def __init__(self):
        self.index = 0

    def __repr__(self):
        return "<cursor at {}>".format(self.index)


class Container:
    """Mixin for a :class:`~sassdom.node.Node` with an ordered sequence of
    children.

    The class mixing in must call :meth:`_init_container` in its
    constructor, and declare ``'_nodes'`` and ``'_cursors'`` in its
    ``__slots__``.

    New children given to the mutating methods are normalized by
    :meth:`_normalize`, which must be implemented. It gets one item at a time
    (lists and tuples are already flattened, and None is skipped) and yields
    the children to add, after adopting the nodes among them.

    A node that already has a parent is moved: it is removed from its old
    parent first. A node that fills a required child slot of its parent
    (such as the operand of a unary operation) can't be moved, and
    ValueError is raised; add a clone of it, or replace it in its parent
    first.

    A reference to a child (``ref``) is either the child itself or an
    integer index.

    Iterating over a container iterates over a snapshot of its children.

    """
    __slots__ = ()

    def _init_container(self):
        self._nodes = []
        self._cursors = []

    @property
    def nodes(self):
        """A tuple with the children, in order."""
        return tuple(self._nodes)

    @property
    def first(self):
        """The first child, or None."""
        return self._nodes[0] if self._nodes else None

    @property
    def last(self):
        """The last child, or None."""
        return self._nodes[-1] if self._nodes else None

    def __len__(self):
        return len(self._nodes)

    def __iter__(self):
        return iter(tuple(self._nodes))

    def __getitem__(self, k):
        return self._nodes[k]

    def __contains__(self, child):
        return self.index(child) != -1

    def children(self):
        """Iterate over the children that are nodes."""
        for child in tuple(self._nodes):
            if isinstance(child, Node):
                yield child

    def _normalize(self, item):
        """Yield the children to add for ``item``. Must be implemented."""
        raise NotImplementedError

    def _normalize_all(self, items):
        """Return a list of the children to add for all items."""
        result = []
        for item in items:
            if item is None:
                continue
            elif isinstance(item, (list, tuple)):
                result.extend(self._normalize_all(item))
            else:
                result.extend(self._normalize(item))
        return result

    def _release(self, child):
        """Unset the parent of a child that is taken out."""
        if isinstance(child, Node):
            del child.parent

    def _insert(self, position, children):
        """Insert already normalized children and adjust the cursors."""
        if children:
            self._nodes[position:position] = children
            for cursor in self._cursors:
                if cursor.index >= position:
                    cursor.index += len(children)

    def _resolve(self, ref):
        """Return the index of ``ref``, raising ValueError if it is a
        child that is not here.

        """
        index = self.index(ref)
        if index == -1 and not isinstance(ref, int):
            raise ValueError("not a child of {}: {!r}".format(type(self).__name__, ref))
        return index

    def _clamp(self, index):
        return max(0, min(index, len(self._nodes)))

    def index(self, child):
        """Return the index of the child, or -1 if it is not present.

        An integer is returned as is. Nodes are compared by identity and the
        first match is returned.

        """
        if isinstance(child, int):
            return child
        elif isinstance(child, Node):
            for i, n in enumerate(self._nodes):
                if n is child:
                    return i
        else:
            for i, n in enumerate(self._nodes):
                if not isinstance(n, Node) and n == child:
                    return i
        return -1

    def append(self, *items):
        """Add the items at the end.

        Raises ValueError if an item is a node that fills a required child
        slot of another node.

        """
        self._insert(len(self._nodes), self._normalize_all(items))
        return self

    def prepend(self, *items):
        """Add the items at the beginning."""
        self._insert(0, self._normalize_all(items))
        return self

    def push(self, child):
        """Add one child at the end.

        Unlike :meth:`append`, the child is added as is.

        """
        if isinstance(child, Node):
            self.adopt(child)
        self._insert(len(self._nodes), [child])
        return self

    def insert_before(self, ref, items):
        """Insert the items before the referenced child.

        An integer index outside the children is clamped: before the first
        or after the last child.

        """
        children = self._normalize_all((items,))
        self._insert(self._clamp(self._resolve(ref)), children)
        return self

    def insert_after(self, ref, items):
        """Insert the items after the referenced child.

        An integer index outside the children is clamped: before the first
        or after the last child.

        """
        children = self._normalize_all((items,))
        self._insert(self._clamp(self._resolve(ref) + 1), children)
        return self

    def replace_child(self, ref, items):
        """Replace the referenced child with the items.

        The items may contain the child itself, or other children of this
        container; these are moved.

        """
        index = self._resolve(ref)
        if not 0 <= index < len(self._nodes):
            raise IndexError("child index out of range: {}".format(index))
        before = self._nodes[:index + 1]
        children = self._normalize_all((items,))
        # adopting the items may have taken children out of this container,
        # even the one being replaced
        present = set(map(id, self._nodes))
        index = sum(1 for n in before[:-1] if id(n) in present)
        if id(before[-1]) in present:
            self.remove_child(index)
        self._insert(index, children)
        return self

    def remove_child(self, ref):
        """Remove the referenced child and unset its parent.

        Raises ValueError if the child is not here and IndexError if an
        integer index is out of range.

        """
        index = self._resolve(ref)
        if not 0 <= index < len(self._nodes):
            raise IndexError("child index out of range: {}".format(index))
        child = self._nodes.pop(index)
        self._release(child)
        for cursor in self._cursors:
            if cursor.index >= index:
                cursor.index -= 1
        return self

    def remove_all(self):
        """Remove all children and unset their parent."""
        for child in self._nodes:
            self._release(child)
        self._nodes.clear()
        for cursor in self._cursors:
            cursor.index = -1
        return self

    def _drop_child(self, node):
        """Release ``node``; called by :meth:`~sassdom.node.Node.remove`."""
        if self.index(node) != -1:
            self.remove_child(node)
        else:
            super()._drop_child(node)

    def each(self, callback):
        """Call ``callback(child, index)`` for every child, in order.

        Children may be added or removed by the callback (or by anything
        else) during the traversal: the children not yet visited are still
        visited exactly once, at their new index. Children added after the
        current one are visited too.

        If the callback returns False, the traversal stops and False is
        returned. Otherwise None is returned.

        """
        cursor = _Cursor()
        self._cursors.append(cursor)
        try:
            while cursor.index < len(self._nodes):
                if callback(self._nodes[cursor.index], cursor.index) is False:
                    return False
                cursor.index += 1
        finally:
            self._cursors.remove(cursor)

    def every(self, predicate):
        """Return True if ``predicate(child)`` is true for all children."""
        return all(predicate(child) for child in tuple(self._nodes))

    def some(self, predicate):
        """Return True if ``predicate(child)`` is true for any child."""
        return any(predicate(child) for child in tuple(self._nodes))
