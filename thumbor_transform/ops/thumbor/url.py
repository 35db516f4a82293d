"""
Thumbor URL builder.

Serialises operations in the order Thumbor's URL grammar expects::

    /<signature>/fit-in/<w>x<h>/<halign>/<valign>/filters:<f>(<args>):.../<image>

and signs everything after the signature segment with HMAC-SHA1.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from typing import List, Optional, Tuple
from urllib.parse import quote

UNSAFE = "unsafe"


def sign(message: str, key: str) -> str:
    """URL-safe base64 HMAC-SHA1 signature of ``message``."""
    digest = hmac.new(key.encode("utf-8"), message.encode("utf-8"), hashlib.sha1).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii")


def _format_arg(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ThumborUrl:
    """Accumulates Thumbor operations for one image and renders the signed URL."""

    def __init__(self, server: str, secret: Optional[str], image: str):
        self.server = (server or "").rstrip("/")
        self.secret = secret or None
        self.image = image
        self._fit_in = False
        self._size: Optional[Tuple[int, int]] = None
        self._halign: Optional[str] = None
        self._valign: Optional[str] = None
        self._filters: List[Tuple[str, tuple]] = []

    def fit_in(self, width: Optional[int], height: Optional[int]) -> "ThumborUrl":
        self._fit_in = True
        return self.resize(width, height)

    def resize(self, width: Optional[int], height: Optional[int]) -> "ThumborUrl":
        # 0 keeps the proportion of that axis
        self._size = (width or 0, height or 0)
        return self

    def halign(self, value: str) -> "ThumborUrl":
        self._halign = value
        return self

    def valign(self, value: str) -> "ThumborUrl":
        self._valign = value
        return self

    def add_filter(self, name: str, *args) -> "ThumborUrl":
        self._filters.append((name, args))
        return self

    def remove_filter(self, name: str) -> "ThumborUrl":
        self._filters = [f for f in self._filters if f[0] != name]
        return self

    @property
    def filters(self) -> List[str]:
        return [f"{name}({','.join(_format_arg(a) for a in args)})" for name, args in self._filters]

    def commands(self) -> List[str]:
        commands = []
        if self._fit_in:
            commands.append("fit-in")
        if self._size is not None:
            commands.append(f"{self._size[0]}x{self._size[1]}")
        if self._halign:
            commands.append(self._halign)
        if self._valign:
            commands.append(self._valign)
        if self._filters:
            commands.append("filters:" + ":".join(self.filters))
        return commands

    def path(self) -> str:
        """The part of the URL covered by the signature."""
        return "/".join(self.commands() + [quote(self.image.lstrip("/"), safe="/")])

    def __str__(self) -> str:
        path = self.path()
        signature = sign(path, self.secret) if self.secret else UNSAFE
        return f"{self.server}/{signature}/{path}"
