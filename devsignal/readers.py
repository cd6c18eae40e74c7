"""Identifier readers.

Each reader performs one platform read and returns a DeviceSignal. Expected
absence (no permission, no hardware, a disassociated adapter, a missing provider)
comes back as an unavailable signal; readers only raise for broken host
contracts, such as the application's own package not being installed.
"""
import logging
from typing import Any, Optional

from devsignal import capability
from devsignal.api_level import get_api_level
from devsignal.build import UNKNOWN, build_accessor
from devsignal.errors import AppPackageMissingError, PackageNotFoundError
from devsignal.legacy import read_legacy_device_id
from devsignal.platform import ANDROID_ID, TYPE_WIFI, Platform, TelephonyManager
from devsignal.types import DeviceSignal

logger = logging.getLogger(__name__)

# Android ID known to be duplicated across many devices due to a manufacturer bug
INVALID_ANDROID_ID = "9774d56d682e549c"

FB_ATTRIBUTION_URI = "content://com.facebook.katana.provider.AttributionIdProvider"
FB_ATTRIBUTION_COLUMN = "aid"

APP_KEY_METADATA = "LOCALYTICS_APP_KEY"
ROLLUP_KEY_METADATA = "LOCALYTICS_ROLLUP_KEY"

NETWORK_TYPE_WIFI = "wifi"
NETWORK_TYPE_PREFIX = "android_network_type_"
NO_RADIO = "no_radio"


def read_android_id(platform: Platform) -> DeviceSignal:
    legacy = read_legacy_device_id(platform)
    if legacy.present:
        return legacy

    android_id = platform.get_secure_setting(ANDROID_ID)
    if android_id is None or android_id.lower() == INVALID_ANDROID_ID:
        return DeviceSignal.unavailable()
    return DeviceSignal.of(android_id)


def read_serial_number(platform: Platform) -> DeviceSignal:
    api_level = get_api_level(platform)
    if not capability.probe(platform, capability.SERIAL_NUMBER, api_level).granted:
        return DeviceSignal.unavailable()
    return DeviceSignal.of(build_accessor(platform, api_level).serial())


def read_telephony_device_id(platform: Platform) -> DeviceSignal:
    api_level = get_api_level(platform)
    if not capability.probe(platform, capability.TELEPHONY_ID, api_level).granted:
        return DeviceSignal.unavailable()

    try:
        manager = platform.telephony_manager()
        if manager is None:
            return DeviceSignal.unavailable()
        return DeviceSignal.of(manager.get_device_id())
    except PermissionError as e:
        # Android can deny READ_PHONE_STATE right after granting it during install
        logger.warning("Reading the telephony id was rejected", exc_info=e)
        return DeviceSignal.unavailable()


def read_wifi_mac(platform: Platform) -> DeviceSignal:
    api_level = get_api_level(platform)
    if not capability.probe(platform, capability.WIFI_MAC, api_level).granted:
        return DeviceSignal.unavailable()

    try:
        info = platform.wifi_connection_info()
    except PermissionError as e:
        logger.warning("Reading the Wi-Fi connection info was rejected", exc_info=e)
        return DeviceSignal.unavailable()
    if info is None:
        return DeviceSignal.unavailable()
    return DeviceSignal.of(info.mac_address)


def read_network_type(
    platform: Platform, telephony: Optional[TelephonyManager] = None
) -> str:
    """Return "wifi" when connected over Wi-Fi, otherwise a label carrying the
    cellular network type code."""
    api_level = get_api_level(platform)
    if capability.probe(platform, capability.WIFI_CONNECTIVITY, api_level).granted:
        try:
            wifi_info = platform.network_info(TYPE_WIFI)
            if wifi_info is not None and wifi_info.connected_or_connecting:
                return NETWORK_TYPE_WIFI
        except PermissionError as e:
            # Connectivity service sometimes demands ACCESS_NETWORK_STATE even
            # though it isn't documented
            logger.warning(
                "Application does not have the permission ACCESS_NETWORK_STATE. Determining Wi-Fi connectivity is unavailable",
                exc_info=e,
            )

    if telephony is None:
        telephony = platform.telephony_manager()
    if telephony is None:
        return NETWORK_TYPE_PREFIX + NO_RADIO
    return f"{NETWORK_TYPE_PREFIX}{telephony.get_network_type()}"


def read_manufacturer(platform: Platform) -> str:
    return build_accessor(platform, get_api_level(platform)).manufacturer()


def read_fb_attribution(platform: Platform) -> DeviceSignal:
    cursor = None
    try:
        cursor = platform.query(FB_ATTRIBUTION_URI, [FB_ATTRIBUTION_COLUMN])
        if cursor is not None and cursor.move_to_first():
            return DeviceSignal.of(
                cursor.get_string(cursor.get_column_index(FB_ATTRIBUTION_COLUMN))
            )
    except Exception as e:
        logger.warning(f"Error reading FB attribution: {e!r}")
    finally:
        if cursor is not None:
            try:
                cursor.close()
            except Exception as e:
                logger.warning(f"Failed to close attribution cursor: {e!r}")
    return DeviceSignal.unavailable()


def read_app_version(platform: Platform) -> str:
    package_name = platform.package_name()
    try:
        version_name = platform.get_package_info(package_name).version_name
    except PackageNotFoundError as e:
        raise AppPackageMissingError(package_name) from e

    if version_name is None:
        logger.warning(
            "versionName was None--is a versionName attribute set in the Android Manifest?"
        )
        return UNKNOWN
    return version_name


def read_app_metadata(platform: Platform, key: str) -> DeviceSignal:
    package_name = platform.package_name()
    try:
        meta_data = platform.get_application_info(package_name).meta_data
    except PackageNotFoundError as e:
        raise AppPackageMissingError(package_name) from e

    value: Any = None if meta_data is None else meta_data.get(key)
    if not isinstance(value, str):
        return DeviceSignal.unavailable()
    return DeviceSignal.of(value)
