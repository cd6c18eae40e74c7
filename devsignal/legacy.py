import logging
import os

from devsignal.platform import Platform
from devsignal.types import DeviceSignal

logger = logging.getLogger(__name__)

# Where earlier releases of the library kept their device id, relative to the
# application's private files directory.
LEGACY_DEVICE_ID_FILE = os.path.join("localytics", "device_id")
LEGACY_DEVICE_ID_MAX_CHARS = 100


def legacy_device_id_path(platform: Platform) -> str:
    return os.path.join(platform.files_dir(), LEGACY_DEVICE_ID_FILE)


def read_legacy_device_id(platform: Platform) -> DeviceSignal:
    """
    Return the device id left behind by an earlier release, if there is one.
    It must keep being used so a device is counted once across upgrades. Read
    failures mean there is no override.
    """
    path = legacy_device_id_path(platform)
    try:
        if not os.path.isfile(path) or os.path.getsize(path) == 0:
            return DeviceSignal.unavailable()
        with open(path, "r", encoding="utf-8", newline="") as f:
            return DeviceSignal.of(f.read(LEGACY_DEVICE_ID_MAX_CHARS))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read legacy device id at {path}: {e!r}")
        return DeviceSignal.unavailable()
