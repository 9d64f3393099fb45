"""Synthesis configuration — env-driven.

Centralized config using pydantic-settings for environment variable
support. Reads from .env file and CATALOGSMITH_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class SynthConfig(BaseSettings):
    """Synthesis configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export CATALOGSMITH_OUTDIR=/tmp/cdk.out
        export CATALOGSMITH_ASSET_BUCKET_NAME=my-assets-bucket
        export CATALOGSMITH_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CATALOGSMITH_",
        env_file_encoding="utf-8",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"
    debug: bool = False

    # Assembly output
    outdir: Path = Path("cdk.out")

    # Where packaged artifacts are uploaded; may contain ${AWS::...} pseudo parameters
    asset_bucket_name: str = "cdk-assets-${AWS::AccountId}-${AWS::Region}"

    # Default for CloudFormationProductVersion.validate_template
    validate_templates_by_default: bool = True


# Module-level singleton; import as `from catalogsmith.config import config`
config = SynthConfig()
