"""Unit tests for the CLI — Typer command registration and basic behavior."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest
from typer.testing import CliRunner

from catalogsmith.cli.app import app
from catalogsmith.cli.commands.synth import AppLoadError, load_app
from catalogsmith.constructs import App

runner = CliRunner()

REPO_ROOT = Path(__file__).resolve().parents[2]


# ---------------------------------------------------------------------------
# Test: CLI help and registration
# ---------------------------------------------------------------------------


class TestCliApp:
    """The CLI must register all expected commands and show help."""

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        # Typer's no_args_is_help may exit with 0 or 2 depending on version
        assert result.exit_code in (0, 2)
        assert "usage" in result.output.lower()

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "synth" in result.output
        assert "fingerprint" in result.output

    def test_synth_command_exists(self):
        result = runner.invoke(app, ["synth", "--help"])
        assert result.exit_code == 0

    def test_fingerprint_command_exists(self):
        result = runner.invoke(app, ["fingerprint", "--help"])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# Test: synth
# ---------------------------------------------------------------------------


class TestSynthCommand:
    def test_synth_demo_app(self, tmp_path: Path):
        outdir = tmp_path / "cdk.out"
        result = runner.invoke(
            app,
            ["synth", "demo_prod:build_app", "--outdir", str(outdir), "--app-dir", str(REPO_ROOT)],
        )
        assert result.exit_code == 0, result.output
        assert "Synthesis complete" in result.output

        manifest = json.loads((outdir / "manifest.json").read_text(encoding="utf-8"))
        # three identical product stacks share one artifact
        assert len(manifest["assets"]) == 1

    def test_synth_bad_reference(self):
        result = runner.invoke(app, ["synth", "no_colon_here"])
        assert result.exit_code == 1
        assert "Cannot load app" in result.output

    def test_synth_missing_module(self):
        result = runner.invoke(app, ["synth", "definitely_not_a_module_xyz:app"])
        assert result.exit_code == 1


class TestLoadApp:
    def test_loads_factory(self):
        loaded = load_app("demo_prod:build_app", REPO_ROOT)
        assert isinstance(loaded, App)
        assert [s.stack_name for s in loaded.stacks] == ["Stack"]

    def test_rejects_non_app(self):
        with pytest.raises(AppLoadError, match="is not an App"):
            load_app("demo_prod:DEV_ENVIRONMENT_URL", REPO_ROOT)

    def test_rejects_missing_attribute(self):
        with pytest.raises(AppLoadError, match="has no attribute"):
            load_app("demo_prod:nope", REPO_ROOT)


# ---------------------------------------------------------------------------
# Test: fingerprint
# ---------------------------------------------------------------------------


class TestFingerprintCommand:
    def test_groups_identical_files(self, tmp_path: Path, product1_template: Path, product2_template: Path):
        copy = tmp_path / "copy.template.json"
        shutil.copy(product1_template, copy)

        result = runner.invoke(
            app,
            ["fingerprint", str(product1_template), str(copy), str(product2_template)],
        )
        assert result.exit_code == 0, result.output
        assert "3 file(s), 2 unique artifact(s)" in result.output

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["fingerprint", str(tmp_path / "missing.json")])
        assert result.exit_code != 0
