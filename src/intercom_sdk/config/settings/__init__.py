"""Agregador de settings do SDK.

Re-exporta settings e funções de carga a partir do ambiente.
"""

from __future__ import annotations

from intercom_sdk.config.settings.intercom import (
    DEFAULT_USER_AGENT,
    INTERCOM_API_BASE_URL,
    IntercomSettings,
    get_intercom_settings,
)

__all__ = [
    # Constants
    "DEFAULT_USER_AGENT",
    "INTERCOM_API_BASE_URL",
    # Settings
    "IntercomSettings",
    "get_intercom_settings",
]
