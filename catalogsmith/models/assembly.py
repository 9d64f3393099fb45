"""Cloud assembly models — what one synthesis pass produces."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from catalogsmith.models.artifacts import AssetManifestEntry


class StackArtifact(BaseModel):
    """A synthesized stack: its template and the artifacts it references."""

    model_config = ConfigDict(frozen=True)

    stack_name: str
    template_file: str
    template: dict[str, Any]
    assets: list[AssetManifestEntry] = Field(default_factory=list)

    def resources_of_type(self, resource_type: str) -> dict[str, dict[str, Any]]:
        """Return ``{logical_id: resource}`` for every resource of a type."""
        return {
            logical_id: resource
            for logical_id, resource in self.template.get("Resources", {}).items()
            if resource.get("Type") == resource_type
        }


class CloudAssembly(BaseModel):
    """The output of ``App.synth()``.

    ``assets`` is deduplicated across every stack of the pass; each stack's
    own ``assets`` lists only the artifacts that stack references.
    """

    model_config = ConfigDict(frozen=True)

    outdir: Path
    stacks: list[StackArtifact]
    assets: list[AssetManifestEntry] = Field(default_factory=list)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    def get_stack(self, stack_name: str) -> StackArtifact:
        for stack in self.stacks:
            if stack.stack_name == stack_name:
                return stack
        raise KeyError(f"Stack not found in assembly: {stack_name}")
