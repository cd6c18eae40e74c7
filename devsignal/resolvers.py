"""Public resolvers. Each composes a capability check, a single read and (where
the value leaves the device) the one-way hash, independently of the others.
A None return means the identifier is unavailable on this device."""
from typing import Optional

from devsignal import readers
from devsignal.api_level import get_api_level as _get_api_level
from devsignal.hashing import hash_signal, sha256_buggy
from devsignal.platform import Platform, TelephonyManager
from devsignal.types import ApiLevel, DeviceSignal, HashedSignal

__all__ = [
    "get_api_level",
    "get_android_id",
    "get_android_id_signal",
    "get_android_id_hash",
    "get_serial_number_hash",
    "get_serial_number_signal",
    "get_telephony_device_id",
    "get_wifi_mac_hash",
    "get_wifi_mac_signal",
    "get_network_type",
    "get_manufacturer",
    "get_fb_attribution",
    "get_app_version",
    "get_app_key",
    "get_rollup_key",
    "sha256_buggy",
]


def get_api_level(platform: Platform) -> ApiLevel:
    return _get_api_level(platform)


def get_android_id_signal(platform: Platform) -> DeviceSignal:
    return readers.read_android_id(platform)


def get_android_id(platform: Platform) -> Optional[str]:
    """The device's Android ID, or the id an earlier release left on disk."""
    return get_android_id_signal(platform).value_or_none()


def get_android_id_hash(platform: Platform) -> Optional[str]:
    return hash_signal(get_android_id_signal(platform)).value_or_none()


def get_serial_number_signal(platform: Platform) -> HashedSignal:
    return hash_signal(readers.read_serial_number(platform))


def get_serial_number_hash(platform: Platform) -> Optional[str]:
    """SHA-256 of the hardware serial number. None below API level 9."""
    return get_serial_number_signal(platform).value_or_none()


def get_telephony_device_id(platform: Platform) -> Optional[str]:
    """The IMEI/MEID. None without READ_PHONE_STATE or telephony hardware."""
    return readers.read_telephony_device_id(platform).value_or_none()


def get_wifi_mac_signal(platform: Platform) -> HashedSignal:
    return hash_signal(readers.read_wifi_mac(platform))


def get_wifi_mac_hash(platform: Platform) -> Optional[str]:
    """SHA-256 of the Wi-Fi MAC address. None without ACCESS_WIFI_STATE, without
    Wi-Fi hardware, or when Wi-Fi isn't associated with an access point."""
    return get_wifi_mac_signal(platform).value_or_none()


def get_network_type(
    platform: Platform, telephony: Optional[TelephonyManager] = None
) -> str:
    return readers.read_network_type(platform, telephony)


def get_manufacturer(platform: Platform) -> str:
    return readers.read_manufacturer(platform)


def get_fb_attribution(platform: Platform) -> Optional[str]:
    return readers.read_fb_attribution(platform).value_or_none()


def get_app_version(platform: Platform) -> str:
    return readers.read_app_version(platform)


def get_app_key(platform: Platform) -> Optional[str]:
    return readers.read_app_metadata(platform, readers.APP_KEY_METADATA).value_or_none()


def get_rollup_key(platform: Platform) -> Optional[str]:
    return readers.read_app_metadata(
        platform, readers.ROLLUP_KEY_METADATA
    ).value_or_none()
