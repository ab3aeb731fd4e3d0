from django.apps import AppConfig


class RentalsConfig(AppConfig):
    name = "apps.rentals"

    def ready(self) -> None:  # pragma: no cover - import side effects
        from shared.application.message_bus import message_bus

        from . import handlers

        handlers.register(message_bus)
