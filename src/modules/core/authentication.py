"""Header-based role authentication for Django REST Framework.

The caller asserts its role in a single request header (``X-User-Role``
by default, see ``settings.ROLE_HEADER``).  There is no credential to
verify: the header is trusted as sent and only drives the allow-list
check in ``HasRequiredRole``.

Status codes
------------
* Header missing on a gated route -> ``401`` (``NotAuthenticated``).
* Header present but role not allowed -> ``403`` (``PermissionDenied``).
"""

from __future__ import annotations

import structlog
from django.conf import settings
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import NotAuthenticated, PermissionDenied
from rest_framework.permissions import BasePermission

from modules.core.roles import is_role_allowed, normalise_role

logger = structlog.get_logger(__name__)


def role_header_meta_key(header: str) -> str:
    """Translate an HTTP header name into its ``request.META`` key."""
    return "HTTP_" + header.upper().replace("-", "_")


class RoleUser:
    """Lightweight user object carrying the asserted role."""

    is_authenticated = True
    is_active = True

    def __init__(self, role: str):
        self.role = role

    @property
    def pk(self) -> str:
        return self.role

    def __str__(self) -> str:  # pragma: no cover
        return self.role


class RoleHeaderAuthentication(BaseAuthentication):
    """DRF authentication class that reads the role header."""

    def authenticate(self, request):
        """Return ``(RoleUser, None)`` or ``None`` when the header is absent."""
        role = normalise_role(
            request.META.get(role_header_meta_key(settings.ROLE_HEADER))
        )
        if not role:
            return None
        return (RoleUser(role), None)

    def authenticate_header(self, request):
        """Value for the ``WWW-Authenticate`` response header on 401."""
        return f'{settings.ROLE_HEADER} realm="api"'


class HasRequiredRole(BasePermission):
    """Allow the request only when the caller's role is in the allow-list.

    The allow-list is ``view.required_roles`` when the view defines it,
    otherwise ``settings.PRODUCT_ADMIN_ROLES``.
    """

    def has_permission(self, request, view) -> bool:
        required_roles = getattr(view, "required_roles", None) or settings.PRODUCT_ADMIN_ROLES
        role = getattr(request.user, "role", None)

        if not role:
            logger.warning("role_gate.missing_role", path=request.path)
            raise NotAuthenticated("Role not found in the request")

        if not is_role_allowed(role, required_roles):
            logger.warning("role_gate.denied", path=request.path, role=role)
            raise PermissionDenied("Role not allowed to access this resource")

        return True
