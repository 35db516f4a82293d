"""
Registry for optional extras (`thumbor-transform[s3]`).

Extras only signal capabilities to the host; URL building never imports them.
"""

from __future__ import annotations

import importlib.util
from dataclasses import dataclass
from typing import Dict, Iterable


@dataclass(frozen=True)
class Extra:
    """
    Metadata describing an optional feature bundle.
    """

    name: str
    description: str
    packages: Iterable[str]


EXTRAS: Dict[str, Extra] = {}


def register_extra(extra: Extra) -> None:
    """
    Register an extra feature bundle.

    Args:
        extra: Extra metadata to register.
    """
    EXTRAS[extra.name] = extra


def missing_packages(extra_name: str) -> list:
    """
    List the packages of a registered extra that cannot be imported.

    Raises:
        ImportError: If the extra is not registered.
    """
    if extra_name not in EXTRAS:
        raise ImportError(f"Extra '{extra_name}' is not recognized.")
    return [pkg for pkg in EXTRAS[extra_name].packages if importlib.util.find_spec(pkg) is None]


def is_extra_installed(extra_name: str) -> bool:
    return not missing_packages(extra_name)


register_extra(
    Extra(
        name="s3",
        description="S3-compatible storage volumes (bucket prefixes in Thumbor paths)",
        packages=("aioboto3",),
    )
)
