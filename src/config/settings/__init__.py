"""Agregador de settings do onesignal-connector.

Re-exporta settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.onesignal import (
    DEFAULT_REQUEST_TIMEOUT_MS,
    ONESIGNAL_API_BASE_URL,
    OneSignalSettings,
    get_onesignal_settings,
)

__all__ = [
    # Constants
    "DEFAULT_REQUEST_TIMEOUT_MS",
    "ONESIGNAL_API_BASE_URL",
    # OneSignal
    "OneSignalSettings",
    "get_onesignal_settings",
]
