"""Service Catalog products.

``CloudFormationProduct`` renders an ``AWS::ServiceCatalog::CloudFormationProduct``
resource whose provisioning artifacts are the given product versions.
``Product.from_product_arn`` references a product that already exists.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from catalogsmith.constructs.base import Construct, Resource
from catalogsmith.constructs.template import CloudFormationTemplate, UrlTemplate
from catalogsmith.core.unique_id import PATH_SEP
from catalogsmith.core.validation import (
    validate_email,
    validate_length,
    validate_non_empty,
    validate_url,
)

if TYPE_CHECKING:
    from catalogsmith.core.session import SynthesisSession

logger = logging.getLogger(__name__)

PRODUCT_RESOURCE_TYPE = "AWS::ServiceCatalog::CloudFormationProduct"


class InvalidArnError(ValueError):
    """Raised when an ARN cannot be parsed into a product reference."""


class MessageLanguage(str, Enum):
    """Language for error and status messages (``AcceptLanguage``)."""

    EN = "en"
    JP = "jp"
    ZH = "zh"


class CloudFormationProductVersion(BaseModel):
    """One provisioning artifact of a product.

    ``validate_template=None`` falls back to the configured default.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    cloud_formation_template: CloudFormationTemplate
    product_version_name: str | None = None
    description: str | None = None
    validate_template: bool | None = None


class Product(Resource):
    """Base for products; exposes the product's ARN and ID."""

    @property
    def product_arn(self) -> str | dict[str, Any]:
        raise NotImplementedError

    @property
    def product_id(self) -> str | dict[str, Any]:
        raise NotImplementedError

    @staticmethod
    def from_product_arn(scope: Construct, id: str, product_arn: str) -> ImportedProduct:
        """Reference an existing product by ARN.

        Raises
        ------
        InvalidArnError
            If the ARN is malformed or has no product ID resource name.
        """
        return ImportedProduct(scope, id, product_arn)


def _product_id_from_arn(arn: str) -> str:
    parts = arn.split(":", 5)
    if len(parts) < 6 or parts[0] != "arn":
        raise InvalidArnError(f"ARNs must have at least 6 components: {arn}")
    resource = parts[5]
    _, sep, resource_name = resource.partition("/")
    if not sep or not resource_name:
        raise InvalidArnError(f"Missing required Product ID from Product ARN: {arn}")
    return resource_name


class ImportedProduct(Product):
    """A product defined outside this app. Renders nothing."""

    def __init__(self, scope: Construct, id: str, product_arn: str) -> None:
        product_id = _product_id_from_arn(product_arn)
        super().__init__(scope, id)
        self._product_arn = product_arn
        self._product_id = product_id

    @property
    def product_arn(self) -> str:
        return self._product_arn

    @property
    def product_id(self) -> str:
        return self._product_id

    def render(self, session: SynthesisSession) -> None:
        return None


class CloudFormationProduct(Product):
    """A Service Catalog product backed by CloudFormation templates.

    All properties are validated here, at construction, so a bad email or
    URL fails where it was written rather than at synthesis.

    Raises
    ------
    ProductValidationError
        If ``product_versions`` is empty, an email or URL is malformed, or a
        text field is outside its allowed length.
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        *,
        product_name: str,
        owner: str,
        product_versions: list[CloudFormationProductVersion],
        description: str | None = None,
        distributor: str | None = None,
        message_language: MessageLanguage | None = None,
        replace_product_version_ids: bool | None = None,
        support_description: str | None = None,
        support_email: str | None = None,
        support_url: str | None = None,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.product_name = product_name
        self.owner = owner
        self.product_versions = list(product_versions)
        self.description = description
        self.distributor = distributor
        self.message_language = message_language
        self.replace_product_version_ids = replace_product_version_ids
        self.support_description = support_description
        self.support_email = support_email
        self.support_url = support_url
        self.tags = dict(tags or {})
        # a rejected product must not join the tree
        self._validate(PATH_SEP.join([*scope.path_components, id]))
        super().__init__(scope, id)

    def _validate(self, path: str) -> None:
        validate_length(path, "product name", 1, 100, self.product_name)
        validate_length(path, "product owner", 1, 8191, self.owner)
        validate_length(path, "product description", 0, 8191, self.description)
        validate_length(path, "product distributor", 0, 8191, self.distributor)
        validate_email(path, "support email", self.support_email)
        validate_url(path, "support url", self.support_url)
        validate_length(path, "support description", 0, 8191, self.support_description)
        validate_non_empty(path, "product versions", self.product_versions)

        for version in self.product_versions:
            validate_length(path, "provisioning artifact name", 0, 100, version.product_version_name)
            validate_length(path, "provisioning artifact description", 0, 8191, version.description)
            template = version.cloud_formation_template
            if isinstance(template, UrlTemplate):
                validate_url(path, "provisioning template url", template.url)

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    @property
    def product_id(self) -> dict[str, str]:
        return self.ref

    @property
    def product_arn(self) -> dict[str, Any]:
        return {
            "Fn::Join": [
                "",
                [
                    "arn:",
                    {"Ref": "AWS::Partition"},
                    ":catalog:",
                    {"Ref": "AWS::Region"},
                    ":",
                    {"Ref": "AWS::AccountId"},
                    ":product/",
                    self.ref,
                ],
            ]
        }

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _provisioning_artifact(
        self, version: CloudFormationProductVersion, session: SynthesisSession
    ) -> dict[str, Any]:
        validate_template = version.validate_template
        if validate_template is None:
            validate_template = session.config.validate_templates_by_default
        if not validate_template:
            logger.warning(
                "Template validation disabled for %s version %s.",
                self.path, version.product_version_name or "<unnamed>",
            )

        template_config = version.cloud_formation_template.bind(session, self.stack.path)
        artifact: dict[str, Any] = {
            "DisableTemplateValidation": not validate_template,
            "Info": {"LoadTemplateFromURL": template_config.http_url},
        }
        if version.product_version_name is not None:
            artifact["Name"] = version.product_version_name
        if version.description is not None:
            artifact["Description"] = version.description
        return artifact

    def render(self, session: SynthesisSession) -> dict[str, Any]:
        properties: dict[str, Any] = {
            "Name": self.product_name,
            "Owner": self.owner,
            "ProvisioningArtifactParameters": [
                self._provisioning_artifact(version, session)
                for version in self.product_versions
            ],
        }
        optional = {
            "AcceptLanguage": self.message_language.value if self.message_language else None,
            "Description": self.description,
            "Distributor": self.distributor,
            "ReplaceProvisioningArtifacts": self.replace_product_version_ids,
            "SupportDescription": self.support_description,
            "SupportEmail": self.support_email,
            "SupportUrl": self.support_url,
        }
        properties.update({k: v for k, v in optional.items() if v is not None})
        if self.tags:
            properties["Tags"] = [
                {"Key": key, "Value": value} for key, value in sorted(self.tags.items())
            ]
        return {"Type": PRODUCT_RESOURCE_TYPE, "Properties": properties}
