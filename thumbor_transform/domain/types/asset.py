import enum
import posixpath
from typing import Any, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from thumbor_transform.domain.types.base import BaseInfo
from thumbor_transform.io.url import is_s3_url, parse_s3_url


class StorageLookupError(RuntimeError):
    """Raised when the storage backend of an asset cannot be resolved."""


class StorageKind(str, enum.Enum):
    LOCAL = "local"
    S3 = "s3"


class StorageLocation(BaseModel):
    """Resolved storage backend of an asset."""

    kind: StorageKind = StorageKind.LOCAL
    bucket: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class FocalPoint(BaseModel):
    """Normalized (0..1) coordinate of the most important region of an image."""

    x: float = Field(..., ge=0, le=1)
    y: float = Field(..., ge=0, le=1)

    model_config = ConfigDict(frozen=True)


class AssetDescriptor(BaseInfo):
    path: str = Field(..., description="Storage-relative path of the asset file")
    extension: Optional[str] = Field(default=None, description="File extension, lower-cased")
    width: Optional[int] = None
    height: Optional[int] = None
    focal_point: Optional[FocalPoint] = None
    location: Optional[str] = Field(
        default=None,
        description="Storage location URI, e.g. s3://bucket/key or file:///srv/assets",
    )
    bucket: Optional[str] = Field(default=None, description="Explicit storage bucket")

    @model_validator(mode="before")
    def extract_extension_from_path(cls, values: Any) -> Any:
        """Get extension from path when loading the model"""
        if not isinstance(values, dict):
            return values
        path = values.get("path")
        if path and not values.get("extension"):
            _, ext = posixpath.splitext(path)
            values = {**values, "extension": ext.lstrip(".") or None}
        return values

    @field_validator("extension")
    def normalize_extension(cls, v: Optional[str]) -> Optional[str]:
        return v.lower().lstrip(".") if v else v

    def get_storage(self) -> StorageLocation:
        """
        Resolve the storage backend the asset lives on.

        Raises:
            StorageLookupError: the location is an S3 URI without a bucket,
                or uses a scheme no storage backend is known for.
        """
        if self.bucket:
            return StorageLocation(kind=StorageKind.S3, bucket=self.bucket)
        if not self.location:
            return StorageLocation()

        if is_s3_url(self.location):
            bucket, _ = parse_s3_url(self.location)
            if bucket is None:
                raise StorageLookupError(f"No bucket in storage location {self.location!r}")
            return StorageLocation(kind=StorageKind.S3, bucket=bucket)

        scheme = urlparse(self.location).scheme
        if scheme in ("", "file"):
            return StorageLocation()
        raise StorageLookupError(f"Unsupported storage location scheme: {scheme!r}")
