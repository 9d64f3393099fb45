"""Construct base — naming and path bookkeeping shared by every construct.

A construct only knows its id and its parent. Paths such as
``Stack/MyProduct`` are used for error messages and for deriving logical
IDs and artifact names; rendering state lives in the ``SynthesisSession``
passed to ``render()``, never on the construct.
"""

from __future__ import annotations

from typing import Any

from catalogsmith.core.unique_id import PATH_SEP, make_unique_id


class ConstructError(ValueError):
    """Raised for invalid construct ids or tree placement."""


class Construct:
    """A named node with an optional parent.

    Parameters
    ----------
    scope:
        The parent construct, or ``None`` for a root.
    id:
        Identifier unique among the parent's children. Must not contain ``/``.
    """

    def __init__(self, scope: Construct | None, id: str) -> None:
        if not id:
            raise ConstructError("Construct id must be a non-empty string")
        if PATH_SEP in id:
            raise ConstructError(f"Construct id must not contain '{PATH_SEP}': {id!r}")
        self.node_id = id
        self.scope = scope
        self._children: dict[str, Construct] = {}
        if scope is not None:
            scope._add_child(self)

    def _add_child(self, child: Construct) -> None:
        if child.node_id in self._children:
            raise ConstructError(
                f"There is already a construct with id {child.node_id!r} in {self.path or '<root>'}"
            )
        self._children[child.node_id] = child

    @property
    def children(self) -> list[Construct]:
        return list(self._children.values())

    @property
    def path_components(self) -> list[str]:
        """Path from the outermost named ancestor down to this construct."""
        if self.scope is None:
            return [self.node_id]
        return [*self.scope.path_components, self.node_id]

    @property
    def path(self) -> str:
        return PATH_SEP.join(self.path_components)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"


class Resource(Construct):
    """A construct that renders to one CloudFormation resource.

    Its logical ID is unique within the nearest enclosing stack.
    """

    def __init__(self, scope: Construct, id: str) -> None:
        self.stack = _find_stack(scope)
        super().__init__(scope, id)

    @property
    def logical_id(self) -> str:
        stack_components = self.stack.path_components
        relative = self.path_components[len(stack_components):]
        return make_unique_id(relative)

    @property
    def ref(self) -> dict[str, str]:
        return {"Ref": self.logical_id}

    def render(self, session: Any) -> dict[str, Any] | None:
        """Return the resource body, or ``None`` if nothing is emitted."""
        raise NotImplementedError


def _find_stack(scope: Construct | None) -> Any:
    from catalogsmith.constructs.stack import StackBase

    node = scope
    while node is not None:
        if isinstance(node, StackBase):
            return node
        node = node.scope
    raise ConstructError("Resources must be defined within a Stack or ProductStack")
