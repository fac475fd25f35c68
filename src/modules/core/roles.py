"""Role allow-list check used by the HTTP layer.

Kept free of Django and DRF imports so it can be called from any
transport: the decision is a function of the asserted role and the
roles a route requires, nothing else.
"""

from __future__ import annotations

from typing import Iterable, Optional


def normalise_role(role: Optional[str]) -> str:
    """Strip surrounding whitespace; ``None`` becomes an empty string."""
    return (role or "").strip()


def is_role_allowed(role: Optional[str], required_roles: Iterable[str]) -> bool:
    """Return ``True`` when ``role`` is one of ``required_roles``.

    A missing or blank role is never allowed.  Comparison is exact
    (case-sensitive), matching the value sent in the role header.
    """
    role = normalise_role(role)
    if not role:
        return False
    return role in {normalise_role(r) for r in required_roles}
