"""
Domain models (asset and transform descriptors).
"""

from thumbor_transform.domain.types.asset import (
    AssetDescriptor,
    FocalPoint,
    StorageKind,
    StorageLocation,
    StorageLookupError,
)
from thumbor_transform.domain.types.transform import TransformDescriptor, TransformMode
