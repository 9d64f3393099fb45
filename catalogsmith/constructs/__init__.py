"""catalogsmith constructs — the declarative surface users build apps from."""

from catalogsmith.constructs.app import App
from catalogsmith.constructs.base import Construct, ConstructError, Resource
from catalogsmith.constructs.product import (
    CloudFormationProduct,
    CloudFormationProductVersion,
    ImportedProduct,
    InvalidArnError,
    MessageLanguage,
    Product,
)
from catalogsmith.constructs.product_stack import ProductStack
from catalogsmith.constructs.stack import CfnResource, Stack, StackBase
from catalogsmith.constructs.template import (
    AssetTemplate,
    CloudFormationTemplate,
    CloudFormationTemplateConfig,
    ProductStackTemplate,
    UrlTemplate,
)

__all__ = [
    "App",
    "Construct",
    "ConstructError",
    "Resource",
    "Stack",
    "StackBase",
    "CfnResource",
    "ProductStack",
    "CloudFormationTemplate",
    "CloudFormationTemplateConfig",
    "UrlTemplate",
    "AssetTemplate",
    "ProductStackTemplate",
    "Product",
    "ImportedProduct",
    "CloudFormationProduct",
    "CloudFormationProductVersion",
    "MessageLanguage",
    "InvalidArnError",
]
