"""
Process-wide settings for building transform URLs.
"""

from __future__ import annotations

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from thumbor_transform.io.env import THUMBOR_ENV_FILENAME, parse_env
from thumbor_transform.ops.transforms.sharpen import SharpenPolicy


class BuilderSettings(BaseSettings):
    """
    Settings model populated from ``THUMBOR_*`` environment variables,
    a ``thumbor.env`` file, or keyword arguments.
    """

    base_url: str = Field(default="", description="Base URL of the Thumbor server")
    security_key: SecretStr = Field(default=SecretStr(""), description="Thumbor signing key")
    include_bucket_prefix: bool = False

    auto_sharpen_scaled_images: bool = True
    sharpen_scaled_image_percentage: int = Field(default=50, ge=0)
    sharpen_policy: SharpenPolicy = SharpenPolicy.UPSCALE_PERCENTAGE

    default_quality: int = Field(default=82, ge=0, le=100)
    transform_backend: str = "thumbor"

    model_config = SettingsConfigDict(
        env_prefix="THUMBOR_",
        env_file=THUMBOR_ENV_FILENAME,
        extra="ignore",
        frozen=True,
    )

    @field_validator("base_url", mode="before")
    def resolve_base_url(cls, v):
        return (parse_env(v) or "").rstrip("/") if v is not None else ""

    @field_validator("security_key", mode="before")
    def resolve_security_key(cls, v):
        if isinstance(v, SecretStr):
            v = v.get_secret_value()
        return parse_env(v) or ""

    @property
    def signing_key(self) -> str:
        return self.security_key.get_secret_value()
