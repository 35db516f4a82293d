"""
Auto-sharpen heuristics for scaled images.

Two formulas have been used for deciding when a transformed image needs a
sharpen pass. They are not equivalent, so each is kept as a named policy and
the active one is chosen through configuration.
"""

from __future__ import annotations

import enum
from typing import Optional, Tuple

# ratio original / requested at which DOWNSCALE_RATIO sharpens
DOWNSCALE_SHARPEN_RATIO = 2.0

# Thumbor sharpen(amount, radius, luminance_only)
SHARPEN_ARGS = (0.5, 0.5, True)


class SharpenPolicy(str, enum.Enum):
    #: int(requested / original * 100) >= configured percentage on either axis
    UPSCALE_PERCENTAGE = "upscale_percentage"
    #: original / requested >= 2.0 on either axis
    DOWNSCALE_RATIO = "downscale_ratio"


def _axes(
    requested: Tuple[Optional[int], Optional[int]],
    original: Tuple[Optional[int], Optional[int]],
):
    for req, orig in zip(requested, original):
        if not orig:
            continue
        # an omitted axis is requested at its original size
        yield (req or orig), orig


def should_sharpen(
    policy: SharpenPolicy,
    requested: Tuple[Optional[int], Optional[int]],
    original: Tuple[Optional[int], Optional[int]],
    percentage: int = 50,
) -> bool:
    """
    Decide whether a resize from ``original`` to ``requested`` (width, height)
    should be sharpened. Axes with an unknown or zero original size are
    skipped.
    """
    policy = SharpenPolicy(policy)
    for req, orig in _axes(requested, original):
        if policy is SharpenPolicy.UPSCALE_PERCENTAGE:
            if int(req / orig * 100) >= percentage:
                return True
        elif orig / req >= DOWNSCALE_SHARPEN_RATIO:
            return True
    return False
