"""Product stacks — nested stacks whose template becomes a product version."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsmith.constructs.stack import Stack, StackBase
from catalogsmith.core.hasher import canonical_json_bytes
from catalogsmith.core.unique_id import make_unique_id
from catalogsmith.models.artifacts import AssetPackaging, TemplateDocument

if TYPE_CHECKING:
    from catalogsmith.core.session import SynthesisSession


class ProductStack(StackBase):
    """A stack defined in code and packaged as a product template.

    The product stack is not deployed on its own. Its rendered template is
    packaged as ``<unique id>.product.template.json`` when a product version
    references it; logical IDs are relative to the product stack, so two
    product stacks built the same way render byte-identical templates and
    share one artifact.

    Parameters
    ----------
    stack:
        The parent stack that will reference this product stack.
    id:
        Construct id within the parent stack.
    """

    def __init__(self, stack: Stack, id: str) -> None:
        if not isinstance(stack, Stack):
            raise TypeError("ProductStack must be defined directly within a Stack")
        super().__init__(stack, id)
        self.parent_stack = stack

    @property
    def artifact_file_name(self) -> str:
        return f"{make_unique_id(self.path_components)}.product.template.json"

    def to_document(self, session: SynthesisSession) -> TemplateDocument:
        """Render the template to canonical bytes for packaging."""
        return TemplateDocument(
            content=canonical_json_bytes(self.render(session)),
            origin=self.path,
            file_name=self.artifact_file_name,
            extension=".json",
            packaging=AssetPackaging.PRODUCT_TEMPLATE,
        )
