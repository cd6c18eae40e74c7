import logging

from devsignal.platform import Platform
from devsignal.types import ApiLevel

logger = logging.getLogger(__name__)

# Cupcake. Assumed whenever the platform won't say which version it runs.
OLDEST_API_LEVEL: ApiLevel = 3


def get_api_level(platform: Platform) -> ApiLevel:
    """
    Return the platform's API level. Never raises.

    The SDK string field is read first, because it has existed on every
    version. It is deprecated, so the integer SDK_INT field is used if it ever
    disappears, and OLDEST_API_LEVEL if both reads fail.
    """
    try:
        level = int(str(platform.get_version_field("SDK")).strip())
    except Exception as e:
        logger.warning(f"Could not read SDK version string: {e!r}")
        try:
            level = int(platform.get_version_field("SDK_INT"))
        except Exception as e:
            logger.warning(f"Could not read SDK_INT: {e!r}")
            return OLDEST_API_LEVEL

    if level < OLDEST_API_LEVEL:
        logger.debug(
            f"Reported API level {level} is below {OLDEST_API_LEVEL}; using {OLDEST_API_LEVEL}"
        )
        return OLDEST_API_LEVEL
    return level
