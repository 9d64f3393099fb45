"""Smoke test — synthesizes a small catalog with every template source.

Usage:
    python demo_prod.py
    catalogsmith synth demo_prod:build_app --outdir cdk.out
"""

from __future__ import annotations

from pathlib import Path

from catalogsmith import (
    App,
    CfnResource,
    CloudFormationProduct,
    CloudFormationProductVersion,
    CloudFormationTemplate,
    ProductStack,
    Stack,
)
from catalogsmith.config import config

DEV_ENVIRONMENT_URL = (
    "https://awsdocs.s3.amazonaws.com/servicecatalog/development-environment.template"
)


def _topic_stack(stack: Stack, id: str) -> ProductStack:
    product_stack = ProductStack(stack, id)
    CfnResource(product_stack, "TopicProduct", type="AWS::SNS::Topic")
    return product_stack


def build_app(outdir: Path | None = None) -> App:
    """Build the demo app: one URL version and three identical product stacks."""
    app = App(outdir=outdir)
    stack = Stack(app, "Stack")

    CloudFormationProduct(
        stack,
        "MyProduct",
        product_name="testProduct",
        owner="testOwner",
        support_email="catalog-admins@example.com",
        product_versions=[
            CloudFormationProductVersion(
                product_version_name="v0",
                cloud_formation_template=CloudFormationTemplate.from_url(DEV_ENVIRONMENT_URL),
            ),
            *[
                CloudFormationProductVersion(
                    product_version_name=version,
                    cloud_formation_template=CloudFormationTemplate.from_product_stack(
                        _topic_stack(stack, version)
                    ),
                )
                for version in ("v1", "v2", "v3")
            ],
        ],
    )
    return app


def main() -> None:
    """Run the smoke synthesis and report what was packaged."""
    print(f"catalogsmith smoke synthesis | Environment: {config.environment}")
    assembly = build_app().synth()
    for stack in assembly.stacks:
        print(f"  stack {stack.stack_name}: {stack.template_file}")
    for asset in assembly.assets:
        print(f"  artifact {asset.path} <- {', '.join(asset.consumers)}")
    print(f"{len(assembly.assets)} unique artifact(s) written to {assembly.outdir}")


if __name__ == "__main__":
    main()
