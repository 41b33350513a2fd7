# src/phosys_parser/loader/nodes.py

"""
Node model for parsed PHOSYS documents.

A tree is made of exactly two node kinds:

    Leaf       a single ``name:value`` line (name may be "" for legacy
               nameless lines)
    Container  a named ``===Name Start=== ... ===Name End===`` block owning
               an ordered tuple of Leaf / Container children

Both are frozen dataclasses; the builder assembles them bottom-up, so a
tree can never contain a cycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple, Union

from phosys_parser.core.exceptions import NodeNotFoundError

_MISSING = object()


@dataclass(frozen=True)
class Leaf:
    """
    A terminal name/value node.

    Attributes:
        name: Text before the separator, or "" for a nameless leaf.
        value: Raw payload, taken verbatim from the line.
    """

    name: str
    value: str = ""

    @property
    def is_nameless(self) -> bool:
        return self.name == ""

    def __repr__(self) -> str:
        return f"<Leaf {self.name!r}: {self.value!r}>"


@dataclass(frozen=True)
class Container:
    """
    A named block and its ordered children.

    Attributes:
        name: Block name from the opening marker (never empty).
        children: Leaf and Container nodes in document order. Duplicate
            names are kept.
    """

    name: str
    children: Tuple["Node", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Container name must not be empty")
        # Accept any iterable of children but always store a tuple.
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    # ---------- Required lookups ----------

    def get_leaf(self, name: str) -> Leaf:
        """Return the first direct Leaf child called ``name``."""
        return get_leaf(self, name)

    def get_container(self, name: str) -> "Container":
        """Return the first direct Container child called ``name``."""
        return get_container(self, name)

    # ---------- Read-only helpers ----------

    @property
    def leaves(self) -> List[Leaf]:
        return [c for c in self.children if isinstance(c, Leaf)]

    @property
    def containers(self) -> List["Container"]:
        return [c for c in self.children if isinstance(c, Container)]

    def find_leaves(self, name: str) -> List[Leaf]:
        """Return all direct Leaf children called ``name``."""
        return [c for c in self.leaves if c.name == name]

    def find_containers(self, name: str) -> List["Container"]:
        """Return all direct Container children called ``name``."""
        return [c for c in self.containers if c.name == name]

    def value_of(self, name: str, default: object = _MISSING) -> str:
        """
        Return the value of the first Leaf called ``name``.

        Falls back to ``default`` when given, otherwise raises
        NodeNotFoundError like get_leaf().
        """
        try:
            return get_leaf(self, name).value
        except NodeNotFoundError:
            if default is _MISSING:
                raise
            return default  # type: ignore[return-value]

    def iter_subtree(self) -> Iterator["Node"]:
        """Yield this container and all descendants in depth-first order."""
        stack: List[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, Container):
                stack.extend(reversed(node.children))

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.children)

    def __repr__(self) -> str:
        return f"<Container {self.name!r} children={len(self.children)}>"


Node = Union[Leaf, Container]


def get_leaf(container: Container, name: str) -> Leaf:
    """
    Return the first direct child Leaf of ``container`` named ``name``.

    Only direct children are searched, in insertion order.

    Raises:
        NodeNotFoundError: if no such leaf exists.
    """
    for child in container.children:
        if isinstance(child, Leaf) and child.name == name:
            return child
    raise NodeNotFoundError("leaf", name, container.name)


def get_container(container: Container, name: str) -> Container:
    """
    Return the first direct child Container of ``container`` named ``name``.

    Raises:
        NodeNotFoundError: if no such container exists.
    """
    for child in container.children:
        if isinstance(child, Container) and child.name == name:
            return child
    raise NodeNotFoundError("container", name, container.name)
