"""
Public package interface for thumbor-transform.

Turns an asset transform (crop/resize/format/quality) into a signed Thumbor URL.
"""

from __future__ import annotations

from thumbor_transform.config.forms import ThumborSettingsForm
from thumbor_transform.config.settings import BuilderSettings
from thumbor_transform.domain.types.asset import (
    AssetDescriptor,
    FocalPoint,
    StorageLookupError,
)
from thumbor_transform.domain.types.transform import TransformDescriptor, TransformMode
from thumbor_transform.io.env import parse_env
from thumbor_transform.ops.transforms.base import ImageTransform
from thumbor_transform.ops.transforms.registry import get_transform
from thumbor_transform.ops.transforms.sharpen import SharpenPolicy
from thumbor_transform.ops.transforms.thumbor import ThumborImageTransform, build_url

__all__ = [
    "AssetDescriptor",
    "BuilderSettings",
    "FocalPoint",
    "ImageTransform",
    "SharpenPolicy",
    "StorageLookupError",
    "ThumborImageTransform",
    "ThumborSettingsForm",
    "TransformDescriptor",
    "TransformMode",
    "build_url",
    "get_transform",
    "parse_env",
]
