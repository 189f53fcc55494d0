"""
Changed-files utilities
"""

import hashlib
from typing import Tuple


def mask_secret(secret: str, length: int = 5) -> str:
    """Return a short SHA-256 hash of a secret for logging."""
    if not secret:
        return "<empty>"
    h = hashlib.sha256(str(secret).encode("utf-8")).hexdigest()
    return f"<masked:{h[:length]}>"


def parse_repository(full_name: str) -> Tuple[str, str]:
    """Split an 'owner/repo' string into (owner, repo); missing parts are empty strings."""
    owner, _, repo = (full_name or "").strip().partition("/")
    return owner, repo
