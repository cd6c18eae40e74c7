import logging
from dataclasses import dataclass
from typing import Dict, Optional

from devsignal.platform import (
    ACCESS_WIFI_STATE,
    FEATURE_TELEPHONY,
    FEATURE_WIFI,
    READ_PHONE_STATE,
    Platform,
)
from devsignal.build import SERIAL_API_LEVEL
from devsignal.types import ApiLevel, CapabilityCheck, DenialReason

logger = logging.getLogger(__name__)

TELEPHONY_ID = "telephony_id"
WIFI_MAC = "wifi_mac"
SERIAL_NUMBER = "serial_number"
WIFI_CONNECTIVITY = "wifi_connectivity"


@dataclass(frozen=True)
class Requirement:
    min_api_level: Optional[ApiLevel] = None
    feature: Optional[str] = None
    # hasSystemFeature isn't reliable below this level; the check is skipped there
    feature_api_level: Optional[ApiLevel] = None
    permission: Optional[str] = None
    # Level at which a missing permission is logged
    permission_log_level: int = logging.WARNING
    permission_hint: str = ""


REQUIREMENTS: Dict[str, Requirement] = {
    SERIAL_NUMBER: Requirement(min_api_level=SERIAL_API_LEVEL),
    TELEPHONY_ID: Requirement(
        feature=FEATURE_TELEPHONY,
        feature_api_level=7,
        permission=READ_PHONE_STATE,
        permission_hint="Please consider requesting READ_PHONE_STATE in the AndroidManifest",
    ),
    # Most applications don't need ACCESS_WIFI_STATE, so its absence is only
    # informational
    WIFI_MAC: Requirement(
        feature=FEATURE_WIFI,
        feature_api_level=8,
        permission=ACCESS_WIFI_STATE,
        permission_log_level=logging.INFO,
    ),
    WIFI_CONNECTIVITY: Requirement(permission=ACCESS_WIFI_STATE),
}


def probe(platform: Platform, source_name: str, api_level: ApiLevel) -> CapabilityCheck:
    """Decide whether `source_name` may be read on this platform right now.

    Checks run in order: minimum API level, hardware feature (only where the
    platform reports features reliably), then permission. Permissions are
    re-checked on every call.
    """
    requirement = REQUIREMENTS[source_name]

    if requirement.min_api_level is not None and api_level < requirement.min_api_level:
        logger.info(
            f"{source_name} requires API level {requirement.min_api_level}, device is at {api_level}"
        )
        return CapabilityCheck.deny(source_name, DenialReason.OS_TOO_OLD)

    if requirement.feature is not None:
        if (
            requirement.feature_api_level is not None
            and api_level < requirement.feature_api_level
        ):
            logger.debug(
                f"Feature queries unsupported at API level {api_level}; assuming {requirement.feature} is present"
            )
        elif not platform.has_system_feature(requirement.feature):
            logger.info(
                f"Device does not have {requirement.feature}; cannot read {source_name}"
            )
            return CapabilityCheck.deny(source_name, DenialReason.NO_HARDWARE)

    if requirement.permission is not None:
        try:
            granted = platform.check_permission(requirement.permission)
        except PermissionError as e:
            logger.warning(
                f"Permission check for {requirement.permission} was rejected; {source_name} is unavailable",
                exc_info=e,
            )
            return CapabilityCheck.deny(source_name, DenialReason.UNKNOWN)
        if not granted:
            logger.log(
                requirement.permission_log_level,
                f"Application does not have permission {requirement.permission}; determining {source_name} is not possible. {requirement.permission_hint}".rstrip(),
            )
            return CapabilityCheck.deny(source_name, DenialReason.NO_PERMISSION)

    return CapabilityCheck.allow(source_name)
