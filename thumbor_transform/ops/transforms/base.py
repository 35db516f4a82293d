from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from thumbor_transform.domain.types.asset import AssetDescriptor
from thumbor_transform.domain.types.transform import TransformDescriptor

if TYPE_CHECKING:
    from thumbor_transform.config.settings import BuilderSettings


class ImageTransform(ABC):
    """Capability interface every transform backend implements."""

    def __init__(self, settings: "BuilderSettings"):
        self.settings = settings

    @staticmethod
    @abstractmethod
    def display_name() -> str:
        pass

    @abstractmethod
    def build_transform_url(
        self,
        asset: AssetDescriptor,
        transform: TransformDescriptor,
        output_format: Optional[str] = None,
    ) -> Optional[str]:
        """Return the URL of the transformed asset, or None if the asset is not supported."""

    @abstractmethod
    def build_alternate_format_url(
        self,
        asset: AssetDescriptor,
        transform: TransformDescriptor,
        fmt: str = "webp",
    ) -> Optional[str]:
        """Return the URL of the same transform encoded as ``fmt``."""

    @abstractmethod
    def purge_url(self, url: str) -> bool:
        """Invalidate a transformed URL on the backend. Returns False if unsupported."""

    @abstractmethod
    def resolve_asset_path(self, asset: AssetDescriptor) -> str:
        """Path of the asset as the backend addresses it."""

    def purge_asset(self, asset: AssetDescriptor) -> bool:
        """Invalidate every transformed variant of an asset. Returns False if unsupported."""
        return False


__all__ = ["ImageTransform"]
