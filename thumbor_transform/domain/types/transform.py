import enum
from typing import Any, Mapping, Optional, Union

from pydantic import Field, field_validator

from thumbor_transform.domain.types.base import BaseInfo


class TransformMode(str, enum.Enum):
    FIT = "fit"
    STRETCH = "stretch"
    CROP = "crop"


class TransformDescriptor(BaseInfo):
    """Requested transformation of a single asset."""

    mode: TransformMode = TransformMode.CROP
    width: Optional[int] = None
    height: Optional[int] = None
    position: Optional[str] = Field(
        default="center-center",
        description="Vertical and horizontal anchor, e.g. top-left",
    )
    format: Optional[str] = None
    quality: Optional[int] = Field(default=None, ge=0, le=100)
    # progressive encoding is configured on the Thumbor server, kept only to warn about it
    interlace: Optional[str] = None

    @field_validator("mode", mode="before")
    def coerce_mode(cls, v):
        """Unknown or empty modes fall back to crop."""
        if isinstance(v, TransformMode):
            return v
        try:
            return TransformMode(v)
        except ValueError:
            return TransformMode.CROP

    @property
    def has_interlace(self) -> bool:
        return "interlace" in self.model_fields_set

    @classmethod
    def coerce(
        cls, transform: Union["TransformDescriptor", Mapping[str, Any], None]
    ) -> "TransformDescriptor":
        """Accept a descriptor, a plain mapping from the host, or nothing."""
        if transform is None:
            return cls()
        if isinstance(transform, cls):
            return transform
        return cls.model_validate(dict(transform))
