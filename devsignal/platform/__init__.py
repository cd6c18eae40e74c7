from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from typing_extensions import Protocol

from devsignal.config import Component, System

READ_PHONE_STATE = "android.permission.READ_PHONE_STATE"
ACCESS_WIFI_STATE = "android.permission.ACCESS_WIFI_STATE"

FEATURE_TELEPHONY = "android.hardware.telephony"
FEATURE_WIFI = "android.hardware.wifi"

ANDROID_ID = "android_id"

TYPE_WIFI = "wifi"


@dataclass
class WifiInfo:
    # None when Wi-Fi is up but not associated with an access point
    mac_address: Optional[str] = None


@dataclass
class NetworkInfo:
    connected_or_connecting: bool = False


@dataclass
class PackageInfo:
    package_name: str
    version_name: Optional[str] = None


@dataclass
class ApplicationInfo:
    package_name: str
    meta_data: Optional[Dict[str, Any]] = field(default=None)


class TelephonyManager(Protocol):
    def get_device_id(self) -> Optional[str]:
        ...

    def get_network_type(self) -> int:
        ...


class Cursor(Protocol):
    def move_to_first(self) -> bool:
        ...

    def get_column_index(self, column_name: str) -> int:
        ...

    def get_string(self, column_index: int) -> Optional[str]:
        ...

    def close(self) -> None:
        ...


class Platform(Component):
    """
    Platform is the boundary between identifier resolution and the host device.
    Every method performs a single read of live platform state and is re-queried
    on every call; nothing here may be cached across calls, since permission
    grants in particular can change (or be reported inconsistently) at runtime.

    Expected absence is reported as None or False. Implementations raise
    PermissionError when the platform's security policy rejects a query,
    LookupError when a build field doesn't exist, and PackageNotFoundError when a
    package isn't installed.
    """

    def __init__(self, system: System) -> None:
        super().__init__(system)

    @abstractmethod
    def files_dir(self) -> str:
        """The application's private storage root."""
        pass

    @abstractmethod
    def package_name(self) -> str:
        pass

    @abstractmethod
    def get_secure_setting(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def check_permission(self, permission: str) -> bool:
        pass

    @abstractmethod
    def has_system_feature(self, feature: str) -> bool:
        pass

    @abstractmethod
    def get_version_field(self, name: str) -> Any:
        """Read a field of the platform's version record, e.g. SDK or SDK_INT."""
        pass

    @abstractmethod
    def get_build_field(self, name: str) -> Any:
        """Read a field of the platform's build record, e.g. SERIAL or MANUFACTURER."""
        pass

    @abstractmethod
    def telephony_manager(self) -> Optional[TelephonyManager]:
        pass

    @abstractmethod
    def wifi_connection_info(self) -> Optional[WifiInfo]:
        pass

    @abstractmethod
    def network_info(self, network_type: str) -> Optional[NetworkInfo]:
        pass

    @abstractmethod
    def query(self, uri: str, projection: Sequence[str]) -> Optional[Cursor]:
        """Query an external content provider. Returns None when the provider
        isn't installed."""
        pass

    @abstractmethod
    def get_package_info(self, package_name: str) -> PackageInfo:
        pass

    @abstractmethod
    def get_application_info(self, package_name: str) -> ApplicationInfo:
        pass
