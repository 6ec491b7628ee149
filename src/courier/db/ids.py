# src/courier/db/ids.py
"""Identifier generation for stored records."""

import uuid


def new_id() -> str:
    """Return a fresh collision-free identifier as a canonical UUID string."""
    return str(uuid.uuid4())
