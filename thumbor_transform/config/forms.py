"""
Settings form backing the Thumbor section of the host's transform settings page.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, field_validator

from thumbor_transform.config.extras.extras import is_extra_installed
from thumbor_transform.config.settings import BuilderSettings


class ThumborSettingsForm(BaseModel):
    """Options editable by the host; every string option is optional."""

    base_url: str = ""
    security_key: str = ""
    include_bucket_prefix: bool = False

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    @field_validator("base_url", "security_key", mode="before")
    def default_empty_string(cls, v):
        return "" if v is None else v

    def settings_context(self) -> Dict[str, Any]:
        """Values the host's renderer needs for the settings template."""
        return {
            "image_transform": self.model_dump(),
            "aws_s3_installed": is_extra_installed("s3"),
        }

    def to_settings(self, **overrides: Any) -> BuilderSettings:
        return BuilderSettings(**{**self.model_dump(), **overrides})
