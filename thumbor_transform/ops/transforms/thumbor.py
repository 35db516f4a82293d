"""
Thumbor transform backend.

Maps an asset transform onto a signed Thumbor URL. Nothing is fetched; the
Thumbor server does the work when the URL is requested.
"""

from __future__ import annotations

import logging
import math
import re
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from thumbor_transform.domain.types.asset import AssetDescriptor, StorageLookupError
from thumbor_transform.domain.types.transform import TransformDescriptor, TransformMode
from thumbor_transform.io.env import parse_env
from thumbor_transform.ops.thumbor.url import ThumborUrl
from thumbor_transform.ops.transforms.base import ImageTransform
from thumbor_transform.ops.transforms.registry import register_transform
from thumbor_transform.ops.transforms.sharpen import SHARPEN_ARGS, should_sharpen

if TYPE_CHECKING:
    from thumbor_transform.config.settings import BuilderSettings

logger = logging.getLogger(__name__)

_POSITION_RE = re.compile(r"(top|center|bottom)-(left|center|right)")

INTERLACE_WARNING = (
    "Thumbor enables progressive JPEGs on the server-level, not as a request option. "
    "See https://thumbor.readthedocs.io/en/latest/jpegtran.html"
)


def focal_box(asset: AssetDescriptor) -> Optional[str]:
    """2x2 pixel box around the asset focal point, as ``left x top : right x bottom``."""
    focal_point = asset.focal_point
    if focal_point is None:
        return None

    x = math.floor(focal_point.x * (asset.width or 0))
    y = math.floor(focal_point.y * (asset.height or 0))
    left, top, right, bottom = x - 1, y - 1, x + 1, y + 1
    return f"{left}x{top}:{right}x{bottom}"


def normalize_format(fmt: Optional[str]) -> Optional[str]:
    if not fmt:
        return None
    fmt = fmt.lower()
    return "jpeg" if fmt == "jpg" else fmt


@register_transform("thumbor")
class ThumborImageTransform(ImageTransform):

    @staticmethod
    def display_name() -> str:
        return "Thumbor"

    # --- URLs ---------------------------------------------------
    def build_transform_url(
        self,
        asset: AssetDescriptor,
        transform: Union[TransformDescriptor, Mapping[str, Any], None],
        output_format: Optional[str] = None,
    ) -> Optional[str]:
        if asset.extension == "svg":
            return None

        builder = self._url_builder_for_transform(asset, TransformDescriptor.coerce(transform))
        if output_format:
            builder.remove_filter("format").add_filter("format", normalize_format(output_format))
        return str(builder)

    def build_alternate_format_url(
        self,
        asset: AssetDescriptor,
        transform: Union[TransformDescriptor, Mapping[str, Any], None],
        fmt: str = "webp",
    ) -> Optional[str]:
        return self.build_transform_url(asset, transform, output_format=fmt)

    def purge_url(self, url: str) -> bool:
        # Thumbor has no invalidation API
        return False

    # --- Paths --------------------------------------------------
    def resolve_asset_path(self, asset: AssetDescriptor) -> str:
        uri = asset.path.lstrip("/")
        if not self.settings.include_bucket_prefix:
            return uri

        try:
            storage = asset.get_storage()
        except StorageLookupError as e:
            logger.error(f"Could not resolve storage for {asset.path!r}: {e}")
            return uri

        bucket = parse_env(storage.bucket)
        if bucket:
            uri = f"{bucket}/{uri}"
        return uri

    # --- Internals ----------------------------------------------
    def _url_builder_for_transform(
        self, asset: AssetDescriptor, transform: TransformDescriptor
    ) -> ThumborUrl:
        settings = self.settings
        builder = ThumborUrl(settings.base_url, settings.signing_key, self.resolve_asset_path(asset))

        if transform.mode == TransformMode.FIT:
            # https://thumbor.readthedocs.io/en/latest/usage.html#fit-in
            builder.fit_in(transform.width, transform.height)
        elif transform.mode == TransformMode.STRETCH:
            # https://github.com/thumbor/thumbor/pull/1125
            builder.resize(transform.width, transform.height).add_filter("stretch")
        else:
            # https://thumbor.readthedocs.io/en/latest/usage.html#image-size
            builder.resize(transform.width, transform.height)

            box = focal_box(asset)
            match = _POSITION_RE.search(transform.position or "")
            if box:
                # https://thumbor.readthedocs.io/en/latest/focal.html
                builder.add_filter("focal", box)
            elif match:
                v = match.group(1).replace("center", "middle")
                h = match.group(2)
                builder.halign(h).valign(v)

        # https://thumbor.readthedocs.io/en/latest/format.html
        fmt = normalize_format(transform.format)
        if fmt:
            builder.add_filter("format", fmt)

        # https://thumbor.readthedocs.io/en/latest/quality.html
        quality = transform.quality or settings.default_quality
        if quality:
            builder.add_filter("quality", quality)

        if transform.has_interlace:
            logger.warning(INTERLACE_WARNING)

        if settings.auto_sharpen_scaled_images and should_sharpen(
            settings.sharpen_policy,
            requested=(transform.width, transform.height),
            original=(asset.width, asset.height),
            percentage=settings.sharpen_scaled_image_percentage,
        ):
            # https://thumbor.readthedocs.io/en/latest/sharpen.html
            builder.add_filter("sharpen", *SHARPEN_ARGS)

        return builder


def build_url(
    asset: AssetDescriptor,
    transform: Union[TransformDescriptor, Mapping[str, Any], None],
    settings: "BuilderSettings",
    output_format: Optional[str] = None,
) -> Optional[str]:
    """Build a Thumbor URL without holding on to a backend instance."""
    return ThumborImageTransform(settings).build_transform_url(asset, transform, output_format)
