"""Shared test fixtures for catalogsmith."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from catalogsmith.config import SynthConfig
from catalogsmith.constructs import (
    App,
    CfnResource,
    CloudFormationProductVersion,
    CloudFormationTemplate,
    ProductStack,
    Stack,
)
from catalogsmith.core.artifact_store import AssemblyArtifactStore
from catalogsmith.core.deduplicator import AssetDeduplicator
from catalogsmith.core.session import SynthesisSession
from catalogsmith.models.artifacts import TemplateDocument

FIXTURES = Path(__file__).parent / "fixtures"

DEV_ENVIRONMENT_URL = (
    "https://awsdocs.s3.amazonaws.com/servicecatalog/development-environment.template"
)


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for assembly output."""
    return tmp_path


@pytest.fixture
def synth_config() -> SynthConfig:
    """Settings independent of the caller's environment and .env file."""
    return SynthConfig(_env_file=None, asset_bucket_name="test-assets")


@pytest.fixture
def app(tmp_dir: Path, synth_config: SynthConfig) -> App:
    """Provide an App writing into a temp cdk.out."""
    return App(outdir=tmp_dir / "cdk.out", config=synth_config)


@pytest.fixture
def stack(app: App) -> Stack:
    """Provide the conventional top-level stack named 'Stack'."""
    return Stack(app, "Stack")


@pytest.fixture
def deduplicator() -> AssetDeduplicator:
    return AssetDeduplicator()


@pytest.fixture
def artifact_store(tmp_dir: Path) -> AssemblyArtifactStore:
    """Provide a fresh AssemblyArtifactStore in a temp directory."""
    return AssemblyArtifactStore(tmp_dir / "assembly")


@pytest.fixture
def session(tmp_dir: Path, synth_config: SynthConfig) -> Iterator[SynthesisSession]:
    """Provide an open SynthesisSession; closed after the test."""
    with SynthesisSession(tmp_dir / "session-out", synth_config) as s:
        yield s


@pytest.fixture
def product1_template() -> Path:
    return FIXTURES / "product1.template.json"


@pytest.fixture
def product2_template() -> Path:
    return FIXTURES / "product2.template.json"


# ---------------------------------------------------------------------------
# Factories shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_document() -> Callable[..., TemplateDocument]:
    """Factory fixture: build a TemplateDocument from bytes or text."""

    def _factory(content: bytes | str, origin: str = "", file_name: str = "") -> TemplateDocument:
        if isinstance(content, str):
            content = content.encode("utf-8")
        return TemplateDocument(content=content, origin=origin, file_name=file_name)

    return _factory


@pytest.fixture
def make_topic_product_stack() -> Callable[..., ProductStack]:
    """Factory fixture: a ProductStack holding a single SNS topic."""

    def _factory(
        stack: Stack,
        id: str,
        topic_id: str = "TopicProduct",
        **topic_properties: str,
    ) -> ProductStack:
        product_stack = ProductStack(stack, id)
        CfnResource(
            product_stack,
            topic_id,
            type="AWS::SNS::Topic",
            properties=topic_properties or None,
        )
        return product_stack

    return _factory


@pytest.fixture
def url_version() -> CloudFormationProductVersion:
    """A product version loaded from the Service Catalog sample template URL."""
    return CloudFormationProductVersion(
        cloud_formation_template=CloudFormationTemplate.from_url(DEV_ENVIRONMENT_URL),
    )
