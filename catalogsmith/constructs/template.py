"""Where a product version's CloudFormation template comes from.

Three sources are supported:

- ``CloudFormationTemplate.from_url``: a template already hosted remotely
- ``CloudFormationTemplate.from_asset``: a local template file, packaged as a file asset
- ``CloudFormationTemplate.from_product_stack``: a ``ProductStack`` rendered at synthesis

Binding happens during synthesis, against the session of that pass.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from catalogsmith.models.artifacts import AssetPackaging, TemplateDocument

if TYPE_CHECKING:
    from catalogsmith.constructs.product_stack import ProductStack
    from catalogsmith.core.session import SynthesisSession


class CloudFormationTemplateConfig(BaseModel):
    """Result of binding a template: the URL CloudFormation loads it from."""

    model_config = ConfigDict(frozen=True)

    http_url: str | dict[str, Any]


class CloudFormationTemplate:
    """Base class for template sources."""

    @staticmethod
    def from_url(url: str) -> UrlTemplate:
        """Template hosted at a remote ``http(s)`` URL."""
        return UrlTemplate(url)

    @staticmethod
    def from_asset(path: str | Path) -> AssetTemplate:
        """Template loaded from a local file and uploaded as an asset."""
        return AssetTemplate(path)

    @staticmethod
    def from_product_stack(product_stack: ProductStack) -> ProductStackTemplate:
        """Template rendered from a ``ProductStack``."""
        return ProductStackTemplate(product_stack)

    def bind(
        self, session: SynthesisSession, consumer: str
    ) -> CloudFormationTemplateConfig:
        """Resolve the template's URL for one synthesis pass.

        ``consumer`` is the path of the stack that references the template.
        """
        raise NotImplementedError


class UrlTemplate(CloudFormationTemplate):
    def __init__(self, url: str) -> None:
        self.url = url

    def bind(self, session: SynthesisSession, consumer: str) -> CloudFormationTemplateConfig:
        return CloudFormationTemplateConfig(http_url=self.url)

    def __repr__(self) -> str:
        return f"UrlTemplate({self.url!r})"


class AssetTemplate(CloudFormationTemplate):
    """A template file on disk.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not point at an existing file.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        if not self.path.is_file():
            raise FileNotFoundError(f"Cannot find template asset at {self.path}")

    def to_document(self) -> TemplateDocument:
        return TemplateDocument(
            content=self.path.read_bytes(),
            origin=str(self.path),
            extension=self.path.suffix,
            packaging=AssetPackaging.FILE,
        )

    def bind(self, session: SynthesisSession, consumer: str) -> CloudFormationTemplateConfig:
        ref = session.package(self.to_document(), consumer=consumer)
        return CloudFormationTemplateConfig(http_url=session.asset_url(ref))

    def __repr__(self) -> str:
        return f"AssetTemplate({str(self.path)!r})"


class ProductStackTemplate(CloudFormationTemplate):
    def __init__(self, product_stack: ProductStack) -> None:
        self.product_stack = product_stack

    def bind(self, session: SynthesisSession, consumer: str) -> CloudFormationTemplateConfig:
        ref = session.package(self.product_stack.to_document(session), consumer=consumer)
        return CloudFormationTemplateConfig(http_url=session.asset_url(ref))

    def __repr__(self) -> str:
        return f"ProductStackTemplate({self.product_stack.path!r})"
