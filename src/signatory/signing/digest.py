"""Keyed MD5 digest over a canonical string."""

from __future__ import annotations

import hashlib
import re
from typing import Any

__all__ = ["is_signature", "sign_canonical"]

_SIGNATURE_RE = re.compile(r"[0-9A-F]{32}")


def sign_canonical(canonical: str, secret: str) -> str:
    """Append ``&key=<secret>``, digest with MD5 and return uppercase hex."""
    payload = f"{canonical}&key={secret}"
    return hashlib.md5(payload.encode("utf-8")).hexdigest().upper()


def is_signature(value: Any) -> bool:
    """Return True if value has the 32-char uppercase hex signature shape."""
    return isinstance(value, str) and _SIGNATURE_RE.fullmatch(value) is not None
