"""Tests for Pydantic data models — immutability, defaults, helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from catalogsmith.models.artifacts import (
    ArtifactReference,
    AssetManifestEntry,
    AssetPackaging,
    TemplateDocument,
)
from catalogsmith.models.assembly import CloudAssembly, StackArtifact


class TestArtifactModels:
    def test_template_document_is_frozen(self):
        doc = TemplateDocument(content=b"x")
        with pytest.raises(ValidationError):
            doc.content = b"y"

    def test_template_document_defaults(self):
        doc = TemplateDocument(content=b"x")
        assert doc.extension == ".json"
        assert doc.packaging == AssetPackaging.PRODUCT_TEMPLATE
        assert doc.origin == ""

    def test_reference_is_frozen(self):
        ref = ArtifactReference(fingerprint="ab", path="p", object_key="k")
        with pytest.raises(ValidationError):
            ref.path = "other"

    def test_manifest_entry_from_reference(self):
        ref = ArtifactReference(
            fingerprint="ab" * 32,
            path="asset.x.json",
            object_key="x.json",
            packaging=AssetPackaging.FILE,
            size_bytes=12,
        )
        entry = AssetManifestEntry.from_reference(ref, ["StackB", "StackA"])
        assert entry.id == ref.fingerprint
        assert entry.consumers == ["StackA", "StackB"]
        assert entry.model_dump(mode="json")["packaging"] == "file"


class TestAssemblyModels:
    def test_resources_of_type(self):
        stack = StackArtifact(
            stack_name="Stack",
            template_file="Stack.template.json",
            template={
                "Resources": {
                    "MyProduct": {"Type": "AWS::ServiceCatalog::CloudFormationProduct"},
                    "Topic": {"Type": "AWS::SNS::Topic"},
                }
            },
        )
        assert list(stack.resources_of_type("AWS::SNS::Topic")) == ["Topic"]
        assert stack.resources_of_type("AWS::S3::Bucket") == {}

    def test_get_stack(self):
        stack = StackArtifact(stack_name="Stack", template_file="Stack.template.json", template={})
        assembly = CloudAssembly(outdir=Path("cdk.out"), stacks=[stack])
        assert assembly.get_stack("Stack") == stack
        with pytest.raises(KeyError):
            assembly.get_stack("Missing")
