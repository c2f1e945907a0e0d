from input_guard.shared.config.container import ApplicationContainer
from input_guard.shared.config.settings import Settings, settings

__all__ = [
    "ApplicationContainer",
    "Settings",
    "settings",
]
