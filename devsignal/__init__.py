import logging
from typing import Optional

from devsignal.config import Settings, System
from devsignal.platform import Platform
from devsignal.resolvers import (
    get_api_level,
    get_android_id,
    get_android_id_hash,
    get_app_key,
    get_app_version,
    get_fb_attribution,
    get_manufacturer,
    get_network_type,
    get_rollup_key,
    get_serial_number_hash,
    get_telephony_device_id,
    get_wifi_mac_hash,
    sha256_buggy,
)
from devsignal.types import CapabilityCheck, DenialReason, DeviceSignal, HashedSignal

__all__ = [
    "Settings",
    "System",
    "Platform",
    "DeviceSignal",
    "HashedSignal",
    "CapabilityCheck",
    "DenialReason",
    "get_api_level",
    "get_android_id",
    "get_android_id_hash",
    "get_app_key",
    "get_app_version",
    "get_fb_attribution",
    "get_manufacturer",
    "get_network_type",
    "get_rollup_key",
    "get_serial_number_hash",
    "get_telephony_device_id",
    "get_wifi_mac_hash",
    "sha256_buggy",
    "get_platform",
    "configure",
    "get_settings",
]

logger = logging.getLogger(__name__)

__settings = Settings()

__version__ = "0.1.0"


def configure(**kwargs) -> None:  # type: ignore
    """Override Devsignal's default settings, environment variables or .env files"""
    global __settings
    __settings = Settings(**kwargs)


def get_settings() -> Settings:
    return __settings


def get_platform(settings: Optional[Settings] = None) -> Platform:
    """Build a started System from `settings` and return its Platform."""
    if settings is None:
        settings = get_settings()
    system = System(settings)
    platform = system.instance(Platform)
    system.start()
    return platform
