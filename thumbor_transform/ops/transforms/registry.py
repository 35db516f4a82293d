"""
Registry of transform backends, selected by ``BuilderSettings.transform_backend``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Type

from thumbor_transform.ops.transforms.base import ImageTransform

if TYPE_CHECKING:
    from thumbor_transform.config.settings import BuilderSettings

TRANSFORMS: Dict[str, Type[ImageTransform]] = {}


def register_transform(name: str) -> Callable[[Type[ImageTransform]], Type[ImageTransform]]:
    def decorator(cls: Type[ImageTransform]) -> Type[ImageTransform]:
        TRANSFORMS[name] = cls
        return cls

    return decorator


def get_transform(settings: "BuilderSettings") -> ImageTransform:
    """Instantiate the backend named by the settings."""
    # backends register themselves on import
    import thumbor_transform.ops.transforms.thumbor  # noqa: F401

    name = settings.transform_backend
    if name not in TRANSFORMS:
        raise ValueError(
            f"Unknown transform backend {name!r}. Available: {', '.join(sorted(TRANSFORMS))}"
        )
    return TRANSFORMS[name](settings)
