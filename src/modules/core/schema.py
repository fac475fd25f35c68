"""OpenAPI description of the role-header authentication."""

from django.conf import settings
from drf_spectacular.extensions import OpenApiAuthenticationExtension


class RoleHeaderAuthenticationScheme(OpenApiAuthenticationExtension):
    target_class = "modules.core.authentication.RoleHeaderAuthentication"
    name = "userRole"

    def get_security_definition(self, auto_schema):
        return {
            "type": "apiKey",
            "in": "header",
            "name": settings.ROLE_HEADER,
            "description": "Role of the user (e.g. admin)",
        }
