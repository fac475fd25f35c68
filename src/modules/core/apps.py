from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = "modules.core"
    label = "core"

    def ready(self) -> None:
        # Registers the OpenAPI extension for RoleHeaderAuthentication
        from modules.core import schema  # noqa: F401
