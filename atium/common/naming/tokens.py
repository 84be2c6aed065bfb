# atium/common/naming/tokens.py
from __future__ import annotations

import secrets
import uuid


def random_disambiguator(upper: int = 10000) -> str:
    """Short decimal token in [0, upper). Not unique, just unlikely to repeat."""
    return str(secrets.randbelow(max(1, int(upper))))


def unique_token() -> str:
    """Globally unique name fragment (uuid4, canonical form)."""
    return str(uuid.uuid4())
