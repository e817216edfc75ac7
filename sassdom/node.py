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
This module defines the :class:`Node` class, the base of every node in a
sassdom tree.

A node can have child nodes and a :attr:`~Node.parent`. The parent is
referred to with a weak reference, so a node tree does not contain circular
references. (This also means that you need to keep a reference to a tree's
root node, otherwise it will be garbage collected.)

Unlike a plain Python tree, a node is always owned by at most one parent.
Adding a node somewhere removes it from its previous parent first.

Child nodes are held either in a child slot (a :class:`ChildSlot`
property, like the ``left`` operand of a binary operation) or in the ordered
sequence of a :class:`~.dom.container.Container`.

This module also contains the clone machinery (:meth:`Node.clone`) and the
JSON serialization (:meth:`Node.to_json`).

"""

import copy
import reprlib
import weakref

from .dom.raws import RawWithValue


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "double":  (" ║ ", "   ", " ╠═", " ╚═"),
    "thick":   (" ┃ ", "   ", " ┣╸", " ┗╸"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"


_NO_PARENT = lambda: None


class ChildSlot:
    """A property that holds one child node.

    The ``factory`` is called with every value that is assigned (except None
    and the current child), and must return a Node or raise TypeError. When
    ``optional`` is False, assigning None raises a TypeError.

    The old child is detached, the new child is removed from its previous
    parent (if any) and adopted. The value is stored in the instance attribute
    with the same name prefixed with an underscore, which must be declared in
    the ``__slots__`` of the class.

    A node that fills a required slot of its previous parent can't be taken
    out of there: ValueError is raised. Assign a clone of it instead.

    """
    __slots__ = ('name', 'attr', 'factory', 'optional')

    def __init__(self, factory, optional=False):
        self.factory = factory
        self.optional = optional

    def __set_name__(self, owner, name):
        self.name = name
        self.attr = '_' + name

    def __get__(self, obj, cls):
        if obj is None:
            return self
        return getattr(obj, self.attr, None)

    def __set__(self, obj, value):
        old = getattr(obj, self.attr, None)
        if value is None:
            if not self.optional:
                raise TypeError("{}.{} is required".format(type(obj).__name__, self.name))
        elif value is old:
            return
        else:
            value = obj.adopt(self.factory(value))
        if old is not None:
            del old.parent
        setattr(obj, self.attr, value)

    def drop(self, obj):
        """Called when the child is removed from ``obj`` by :meth:`Node.remove`."""
        if not self.optional:
            raise ValueError("can't remove the required {} of {}".format(
                self.name, type(obj).__name__))
        node = getattr(obj, self.attr)
        del node.parent
        setattr(obj, self.attr, None)


class Node:
    """Base class for all sassdom nodes.

    Every node has three attributes:

    ``parent``
        the parent node or None (a weak reference).

    ``source``
        None if the node was built by hand, or a
        :class:`~.dom.source.LazySource` describing the span of the original
        text the node was read from. A clone shares the source of the node
        it was cloned from.

    ``raws``
        a dictionary with formatting hints, such as whitespace or the
        original spelling of a value. Which keys are used depends on the node
        type; they are only read when writing the node back to text.

    The ``sass_type`` class attribute names the kind of node; see
    :mod:`~sassdom.registry`.

    The ``_clone_fields`` class attribute lists the constructor keywords
    that :meth:`clone` copies, and ``_json_fields`` the attributes
    :meth:`to_json` writes.

    A node always evaluates to True.

    """
    __slots__ = ('__weakref__', '_parent', 'source', 'raws')

    sass_type = None
    _clone_fields = ('raws',)
    _json_fields = ()
    _child_slots = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        slots = []
        for c in reversed(cls.__mro__):
            slots.extend(v for v in vars(c).values() if isinstance(v, ChildSlot))
        cls._child_slots = tuple(slots)

    def __init__(self, raws=None):
        self._parent = _NO_PARENT
        self.source = None
        self.raws = {} if raws is None else raws

    def __repr__(self):
        def result():
            cls = self.__class__
            mod = cls.__module__.split('.')[-1]
            yield "{}.{}".format(mod, cls.__name__)
            body = self.repr_body()
            if body is not None:
                yield body
            if self.source is not None:
                yield '[{}:{}]'.format(self.source.start.offset, self.source.end.offset)
        return "<{}>".format(" ".join(result()))

    def __bool__(self):
        """Always True."""
        return True

    def __str__(self):
        return self.write()

    def repr_body(self):
        """Return a short text to display in the repr, or None."""
        return reprlib.repr(self.write())

    def write(self):
        """Return the source text of this node. Must be implemented."""
        raise NotImplementedError

    @property
    def parent(self):
        """The parent Node or None; uses a weak reference."""
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = _NO_PARENT if node is None else weakref.ref(node)

    @parent.deleter
    def parent(self):
        self._parent = _NO_PARENT

    def adopt(self, node):
        """Make ourselves the parent of ``node``, and return it.

        If the node currently has another parent, it is removed from there
        first. Raises ValueError if the node is ourselves or one of our
        ancestors. Also raises ValueError if the node fills a required
        child slot of its current parent (see :meth:`remove`).

        """
        if node is self or any(n is node for n in self.ancestors()):
            raise ValueError("can't adopt an ancestor of a node")
        if node.parent is not None:
            node.remove()
        node._parent = weakref.ref(self)
        return node

    def remove(self):
        """Remove this node from its parent, and return it.

        Raises ValueError when the node fills a required child slot of the
        parent; replace it in the parent instead.

        """
        parent = self.parent
        if parent is not None:
            parent._drop_child(self)
        return self

    def _drop_child(self, node):
        """Release ``node``; called by :meth:`remove`."""
        for slot in self._child_slots:
            if slot.__get__(self, None) is node:
                slot.drop(self)
                return
        # stale back-reference
        del node.parent

    def children(self):
        """Iterate over the child nodes held in child slots, in document order."""
        for slot in self._child_slots:
            node = slot.__get__(self, None)
            if node is not None:
                yield node

    def root(self):
        """Return the root node."""
        root = self
        for root in self.ancestors():
            pass
        return root

    def ancestors(self):
        """Yield the parent, then the parent's parent, etcetera."""
        n = self.parent
        while n:
            yield n
            n = n.parent

    def descendants(self, reverse=False):
        """Iterate over all the descendants of this node, in document order.

        If ``reverse`` is set to True, yields all descendants in backward
        direction.

        When you :meth:`~generator.send` False to this generator, child nodes
        of the just yielded node will not be yielded.

        """
        if reverse:
            iterate = lambda node: reversed(list(node.children()))
        else:
            iterate = lambda node: node.children()
        stack = []
        gen = iterate(self)
        while True:
            for n in gen:
                if (yield n) is not False:
                    stack.append(gen)
                    gen = iterate(n)
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def instances_of(self, cls):
        """Iterate over the descendants that are an instance of ``cls``.

        The ``cls`` parameter may also be a tuple of more classes, just like the
        standard Python :func:`isinstance`.

        """
        return (n for n in self.descendants() if isinstance(n, cls))

    def is_last(self):
        """Return True if this is the last child node. Fails if no parent."""
        last = None
        for last in self.parent.children():
            pass
        return last is self

    def equals(self, other):
        """Return True if we and other are equivalent.

        This is the case when we and the other have the same class,
        :meth:`body_equals` returns True, and finally for all the children
        this method returns True. Raws and source are not compared.

        """
        if type(self) is not type(other) or not self.body_equals(other):
            return False
        children = list(self.children())
        other_children = list(other.children())
        return len(children) == len(other_children) and \
            all(a.equals(b) for a, b in zip(children, other_children))

    def body_equals(self, other):
        """Implement this to add more :meth:`equals` tests, before all the
        children are compared.

        The default implementation returns True.

        """
        return True

    def clone(self, **overrides):
        """Return a copy of this node, with the same source.

        All fields listed in ``_clone_fields`` are copied. Child nodes are
        cloned as well, and the ``raws`` are copied deeply, so the copy shares
        no mutable state with the original (except the read-only
        :attr:`source`).

        Keyword arguments replace the value of the named field. A keyword
        with the value None resets the field to the default the constructor
        gives it; fields that are required by the constructor can't be reset
        and raise a TypeError. Unknown keywords also raise a TypeError.

        """
        unknown = set(overrides).difference(self._clone_fields)
        if unknown:
            raise TypeError("invalid field for {}.clone(): {}".format(
                type(self).__name__, ', '.join(sorted(unknown))))
        fields = {}
        for name in self._clone_fields:
            if name in overrides:
                value = overrides[name]
                if value is None:
                    continue
            else:
                value = maybe_clone(getattr(self, name))
            fields[name] = value
        node = type(self)(**fields)
        node.source = self.source
        return node

    def to_json(self, inputs=None):
        """Return a dictionary describing this node, that can be serialized
        with :func:`json.dumps`.

        Contains the ``sass_type``, the ``raws`` and the fields named in
        ``_json_fields``. If the node has a source, a ``source`` dictionary
        refers to an entry in the ``inputs`` list of the outermost node.

        """
        toplevel = inputs is None
        if toplevel:
            inputs = {}
        result = {'sass_type': self.sass_type, 'raws': _json_value(self.raws, inputs)}
        for name in self._json_fields:
            result[name] = _json_value(getattr(self, name), inputs)
        if self.source is not None:
            input_id = inputs.setdefault(self.source.input, len(inputs))
            result['source'] = {
                'start': self.source.start._asdict(),
                'end': self.source.end._asdict(),
                'input_id': input_id,
            }
        if toplevel:
            result['inputs'] = [input.to_json(input_id) for input, input_id in inputs.items()]
        return result

    def dump(self, file=None, style=None, depth=0):
        """Display a graphical representation of the node and its child nodes.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        i = 2
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        prefix = []
        node = self
        for _ in range(depth):
            prefix.append(d[i + int(node.is_last())])
            node = node.parent
            i = 0
        print(''.join(reversed(prefix)) + repr(self), file=file)
        for n in self.children():
            n.dump(file, style, depth + 1)


def maybe_clone(value):
    """Return a copy of ``value`` for :meth:`Node.clone`.

    Nodes are cloned, lists and tuples are copied into a list with every
    item cloned, and dictionaries are deep-copied. Other values are returned
    unchanged.

    """
    if isinstance(value, Node):
        return value.clone()
    elif isinstance(value, (list, tuple)) and not isinstance(value, RawWithValue):
        return [maybe_clone(v) for v in value]
    elif isinstance(value, dict):
        return copy.deepcopy(value)
    return value


def _json_value(value, inputs):
    """Convert a field value for :meth:`Node.to_json`."""
    if isinstance(value, Node):
        return value.to_json(inputs)
    elif isinstance(value, RawWithValue):
        return {'raw': value.raw, 'value': _json_value(value.value, inputs)}
    elif isinstance(value, dict):
        return {key: _json_value(v, inputs) for key, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [_json_value(v, inputs) for v in value]
    return value
