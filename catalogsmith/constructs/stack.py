"""Stacks and generic CloudFormation resources."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from catalogsmith.constructs.base import Construct, Resource
from catalogsmith.core.unique_id import make_unique_id

if TYPE_CHECKING:
    from catalogsmith.constructs.app import App
    from catalogsmith.core.session import SynthesisSession

logger = logging.getLogger(__name__)


class StackBase(Construct):
    """Anything that renders to a CloudFormation template of its own."""

    def resources(self) -> list[Resource]:
        """Resources owned by this stack (nested stacks excluded), in definition order."""
        return list(_iter_resources(self))

    def render(self, session: SynthesisSession) -> dict[str, Any]:
        """Render this stack's template. Template binding goes through ``session``."""
        rendered: dict[str, Any] = {}
        for resource in self.resources():
            body = resource.render(session)
            if body is None:
                continue
            logical_id = resource.logical_id
            if logical_id in rendered:
                raise ValueError(
                    f"Duplicate logical ID {logical_id!r} in {self.path}"
                )
            rendered[logical_id] = body
        return {"Resources": rendered}


def _iter_resources(node: Construct) -> Iterator[Resource]:
    for child in node.children:
        if isinstance(child, StackBase):
            continue
        if isinstance(child, Resource):
            yield child
        yield from _iter_resources(child)


class Stack(StackBase):
    """A deployable stack, registered with an ``App``.

    Parameters
    ----------
    app:
        The application this stack belongs to.
    id:
        Stack id; also the root of every construct path inside the stack.
    """

    def __init__(self, app: App, id: str) -> None:
        super().__init__(None, id)
        self.app = app
        app._register(self)

    @property
    def stack_name(self) -> str:
        return self.node_id

    @property
    def artifact_id(self) -> str:
        return make_unique_id(self.path_components)

    @property
    def template_file(self) -> str:
        return f"{self.artifact_id}.template.json"


class CfnResource(Resource):
    """A raw CloudFormation resource.

    Parameters
    ----------
    scope:
        Owning stack (or a construct inside one).
    id:
        Construct id; the logical ID is derived from it.
    type:
        CloudFormation resource type, e.g. ``AWS::SNS::Topic``.
    properties:
        Resource properties, emitted verbatim when non-empty.
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        *,
        type: str,
        properties: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(scope, id)
        self.resource_type = type
        self.properties = dict(properties or {})

    def render(self, session: SynthesisSession) -> dict[str, Any]:
        body: dict[str, Any] = {"Type": self.resource_type}
        if self.properties:
            body["Properties"] = self.properties
        return body
