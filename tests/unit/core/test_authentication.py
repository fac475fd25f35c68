"""Unit tests for RoleHeaderAuthentication and HasRequiredRole."""

import pytest
from django.test import override_settings
from rest_framework.exceptions import NotAuthenticated, PermissionDenied
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from modules.core.authentication import (
    HasRequiredRole,
    RoleHeaderAuthentication,
    RoleUser,
    role_header_meta_key,
)

pytestmark = pytest.mark.unit


@pytest.fixture()
def factory():
    return APIRequestFactory()


def _drf_request(django_request):
    return Request(django_request, authenticators=[RoleHeaderAuthentication()])


class _View:
    pass


class TestRoleHeaderMetaKey:
    def test_default_header(self):
        assert role_header_meta_key("X-User-Role") == "HTTP_X_USER_ROLE"


class TestRoleHeaderAuthentication:
    def test_header_present(self, factory):
        request = factory.get("/product", HTTP_X_USER_ROLE="admin")
        user, auth = RoleHeaderAuthentication().authenticate(request)
        assert isinstance(user, RoleUser)
        assert user.role == "admin"
        assert user.is_authenticated
        assert auth is None

    def test_header_missing(self, factory):
        request = factory.get("/product")
        assert RoleHeaderAuthentication().authenticate(request) is None

    def test_blank_header_treated_as_missing(self, factory):
        request = factory.get("/product", HTTP_X_USER_ROLE="  ")
        assert RoleHeaderAuthentication().authenticate(request) is None

    @override_settings(ROLE_HEADER="X-Role")
    def test_configurable_header(self, factory):
        request = factory.get("/product", HTTP_X_ROLE="admin")
        user, _ = RoleHeaderAuthentication().authenticate(request)
        assert user.role == "admin"

    def test_authenticate_header(self, factory):
        value = RoleHeaderAuthentication().authenticate_header(factory.get("/"))
        assert value.startswith("X-User-Role")


class TestHasRequiredRole:
    def test_admin_allowed(self, factory):
        request = _drf_request(factory.get("/product", HTTP_X_USER_ROLE="admin"))
        assert HasRequiredRole().has_permission(request, _View()) is True

    def test_missing_role_not_authenticated(self, factory):
        request = _drf_request(factory.get("/product"))
        with pytest.raises(NotAuthenticated, match="Role not found in the request"):
            HasRequiredRole().has_permission(request, _View())

    def test_wrong_role_denied(self, factory):
        request = _drf_request(factory.get("/product", HTTP_X_USER_ROLE="user"))
        with pytest.raises(PermissionDenied, match="Role not allowed"):
            HasRequiredRole().has_permission(request, _View())

    def test_view_roles_override_settings(self, factory):
        view = _View()
        view.required_roles = ["auditor"]
        request = _drf_request(factory.get("/product", HTTP_X_USER_ROLE="auditor"))
        assert HasRequiredRole().has_permission(request, view) is True

    @override_settings(PRODUCT_ADMIN_ROLES=["admin", "manager"])
    def test_allow_list_from_settings(self, factory):
        request = _drf_request(factory.get("/product", HTTP_X_USER_ROLE="manager"))
        assert HasRequiredRole().has_permission(request, _View()) is True
