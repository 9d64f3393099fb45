"""catalogsmith: Service Catalog product synthesis with content-addressed templates.

Declare products whose versions come from remote URLs, local template
files, or product stacks defined in Python; ``App.synth()`` renders the
CloudFormation JSON and packages every distinct template exactly once.
"""

__version__ = "0.1.0"
__description__ = (
    "Service Catalog product synthesis with content-addressed template deduplication"
)

from catalogsmith.constructs import (
    App,
    CfnResource,
    CloudFormationProduct,
    CloudFormationProductVersion,
    CloudFormationTemplate,
    MessageLanguage,
    Product,
    ProductStack,
    Stack,
)
from catalogsmith.core.deduplicator import AssetDeduplicator
from catalogsmith.core.session import SynthesisSession

__all__ = [
    "App",
    "Stack",
    "CfnResource",
    "ProductStack",
    "Product",
    "CloudFormationProduct",
    "CloudFormationProductVersion",
    "CloudFormationTemplate",
    "MessageLanguage",
    "AssetDeduplicator",
    "SynthesisSession",
    "__version__",
]
