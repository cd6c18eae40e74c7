"""Build record accessors, one per range of API levels.

Fields were added to the build record over time. Rather than probing for a field
and catching its absence, an accessor is chosen once from the API level and
only reads fields that level is known to expose.
"""
import logging
from typing import Optional

from devsignal.errors import PlatformContractError
from devsignal.platform import Platform
from devsignal.types import ApiLevel

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"

# Build.MANUFACTURER appeared in Donut, Build.SERIAL in Gingerbread
MANUFACTURER_API_LEVEL = 4
SERIAL_API_LEVEL = 9


class BuildAccessor:
    """Cupcake: neither manufacturer nor serial number is exposed."""

    def __init__(self, platform: Platform):
        self._platform = platform

    def manufacturer(self) -> str:
        return UNKNOWN

    def serial(self) -> Optional[str]:
        return None


class DonutBuildAccessor(BuildAccessor):
    def manufacturer(self) -> str:
        try:
            value = self._platform.get_build_field("MANUFACTURER")
        except Exception as e:
            logger.warning(f"Could not read manufacturer: {e!r}")
            return UNKNOWN
        return value if value else UNKNOWN


class GingerbreadBuildAccessor(DonutBuildAccessor):
    def serial(self) -> Optional[str]:
        try:
            return self._platform.get_build_field("SERIAL")
        except LookupError as e:
            # SERIAL is public from this level on; a platform without it is broken
            raise PlatformContractError(
                f"Build.SERIAL is missing on a platform that must expose it: {e}"
            ) from e


def build_accessor(platform: Platform, api_level: ApiLevel) -> BuildAccessor:
    if api_level >= SERIAL_API_LEVEL:
        return GingerbreadBuildAccessor(platform)
    if api_level >= MANUFACTURER_API_LEVEL:
        return DonutBuildAccessor(platform)
    return BuildAccessor(platform)
