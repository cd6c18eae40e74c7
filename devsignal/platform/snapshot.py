import json
import logging
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

from overrides import override
from pydantic import BaseModel

from devsignal.config import System
from devsignal.errors import PackageNotFoundError
from devsignal.platform import (
    TYPE_WIFI,
    ApplicationInfo,
    Cursor,
    NetworkInfo,
    PackageInfo,
    Platform,
    TelephonyManager,
    WifiInfo,
)

logger = logging.getLogger(__name__)


class TelephonySnapshot(BaseModel):
    device_id: Optional[str] = None
    network_type: int = 0


class WifiSnapshot(BaseModel):
    mac_address: Optional[str] = None


class PackageSnapshot(BaseModel):
    version_name: Optional[str] = None
    meta_data: Optional[Dict[str, Any]] = None


class PlatformSnapshot(BaseModel):
    """A point-in-time description of a device, as reported by the host."""

    package_name: str = "com.example.app"
    files_dir: Optional[str] = None
    secure_settings: Dict[str, Optional[str]] = {}
    granted_permissions: List[str] = []
    # Permissions whose check is rejected by the platform's security policy
    rejected_permission_checks: List[str] = []
    features: List[str] = []
    version_fields: Dict[str, Any] = {"SDK": "17", "SDK_INT": 17}
    build_fields: Dict[str, Optional[str]] = {"SERIAL": None, "MANUFACTURER": None}
    telephony: Optional[TelephonySnapshot] = None
    # Connection info of the Wi-Fi adapter; None when the adapter is off
    wifi: Optional[WifiSnapshot] = None
    wifi_connected: bool = False
    # Rows served per content provider URI, keyed by column name
    providers: Dict[str, List[Dict[str, Optional[str]]]] = {}
    failing_providers: List[str] = []
    packages: Dict[str, PackageSnapshot] = {}


class SnapshotCursor:
    def __init__(self, rows: List[Dict[str, Optional[str]]], projection: Sequence[str]):
        self._rows = rows
        self._columns = list(projection)
        self._position = -1
        self.closed = False

    def move_to_first(self) -> bool:
        if not self._rows:
            return False
        self._position = 0
        return True

    def get_column_index(self, column_name: str) -> int:
        if column_name not in self._columns:
            raise LookupError(f"Column {column_name} is not in the projection")
        return self._columns.index(column_name)

    def get_string(self, column_index: int) -> Optional[str]:
        if self._position < 0:
            raise IndexError("Cursor is not positioned on a row")
        return self._rows[self._position].get(self._columns[column_index])

    def close(self) -> None:
        self.closed = True


class SnapshotTelephonyManager:
    def __init__(self, snapshot: TelephonySnapshot, reads: "Counter[str]"):
        self._snapshot = snapshot
        self._reads = reads

    def get_device_id(self) -> Optional[str]:
        self._reads["telephony_device_id"] += 1
        return self._snapshot.device_id

    def get_network_type(self) -> int:
        self._reads["telephony_network_type"] += 1
        return self._snapshot.network_type


class SnapshotPlatform(Platform):
    """
    A Platform backed by a PlatformSnapshot. The snapshot is read from the JSON
    file named by the `snapshot_path` setting, or supplied with load(). Every
    platform read is tallied in `reads` so callers can tell which sources were
    actually touched.
    """

    _snapshot: PlatformSnapshot
    reads: "Counter[str]"
    cursors: List[SnapshotCursor]

    def __init__(self, system: System) -> None:
        super().__init__(system)
        self._files_dir = system.settings.files_dir
        path = system.settings.snapshot_path
        if path is not None:
            with open(path, "r", encoding="utf-8") as f:
                self._snapshot = PlatformSnapshot(**json.load(f))
        else:
            self._snapshot = PlatformSnapshot()
        self.reads = Counter()
        self.cursors = []

    def load(self, snapshot: PlatformSnapshot) -> None:
        self._snapshot = snapshot

    @property
    def snapshot(self) -> PlatformSnapshot:
        return self._snapshot

    @override
    def reset_state(self) -> None:
        super().reset_state()
        self._snapshot = PlatformSnapshot()
        self.reads.clear()
        self.cursors = []

    @override
    def files_dir(self) -> str:
        return self._snapshot.files_dir or self._files_dir

    @override
    def package_name(self) -> str:
        return self._snapshot.package_name

    @override
    def get_secure_setting(self, key: str) -> Optional[str]:
        self.reads["secure_setting"] += 1
        return self._snapshot.secure_settings.get(key)

    @override
    def check_permission(self, permission: str) -> bool:
        self.reads["permission"] += 1
        if permission in self._snapshot.rejected_permission_checks:
            raise PermissionError(f"Permission check for {permission} was rejected")
        return permission in self._snapshot.granted_permissions

    @override
    def has_system_feature(self, feature: str) -> bool:
        self.reads["feature"] += 1
        return feature in self._snapshot.features

    @override
    def get_version_field(self, name: str) -> Any:
        if name not in self._snapshot.version_fields:
            raise LookupError(f"No such version field: {name}")
        return self._snapshot.version_fields[name]

    @override
    def get_build_field(self, name: str) -> Any:
        self.reads[f"build_{name.lower()}"] += 1
        if name not in self._snapshot.build_fields:
            raise LookupError(f"No such build field: {name}")
        return self._snapshot.build_fields[name]

    @override
    def telephony_manager(self) -> Optional[TelephonyManager]:
        if self._snapshot.telephony is None:
            return None
        return SnapshotTelephonyManager(self._snapshot.telephony, self.reads)

    @override
    def wifi_connection_info(self) -> Optional[WifiInfo]:
        self.reads["wifi_connection_info"] += 1
        if self._snapshot.wifi is None:
            return None
        return WifiInfo(mac_address=self._snapshot.wifi.mac_address)

    @override
    def network_info(self, network_type: str) -> Optional[NetworkInfo]:
        self.reads["network_info"] += 1
        if network_type != TYPE_WIFI or self._snapshot.wifi is None:
            return None
        return NetworkInfo(connected_or_connecting=self._snapshot.wifi_connected)

    @override
    def query(self, uri: str, projection: Sequence[str]) -> Optional[Cursor]:
        self.reads["query"] += 1
        if uri in self._snapshot.failing_providers:
            raise RuntimeError(f"Provider {uri} failed to answer the query")
        if uri not in self._snapshot.providers:
            logger.debug(f"No content provider registered for {uri}")
            return None
        cursor = SnapshotCursor(self._snapshot.providers[uri], projection)
        self.cursors.append(cursor)
        return cursor

    @override
    def get_package_info(self, package_name: str) -> PackageInfo:
        package = self._package(package_name)
        return PackageInfo(package_name=package_name, version_name=package.version_name)

    @override
    def get_application_info(self, package_name: str) -> ApplicationInfo:
        package = self._package(package_name)
        return ApplicationInfo(package_name=package_name, meta_data=package.meta_data)

    def _package(self, package_name: str) -> PackageSnapshot:
        if package_name not in self._snapshot.packages:
            raise PackageNotFoundError(package_name)
        return self._snapshot.packages[package_name]
