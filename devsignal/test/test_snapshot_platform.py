import json

import devsignal
from devsignal.config import Settings
from devsignal.datapoints import collect_datapoints
from devsignal.hashing import sha256_buggy
from devsignal.platform import READ_PHONE_STATE
from devsignal.platform.snapshot import SnapshotPlatform

DEVICE = {
    "package_name": "com.example.game",
    "secure_settings": {"android_id": "a1b2c3d4e5f60718"},
    "granted_permissions": [READ_PHONE_STATE],
    "features": ["android.hardware.telephony"],
    "version_fields": {"SDK": "16", "SDK_INT": 16},
    "build_fields": {"SERIAL": "R32C801XYZ", "MANUFACTURER": "samsung"},
    "telephony": {"device_id": "358240051111110", "network_type": 3},
    "providers": {
        "content://com.facebook.katana.provider.AttributionIdProvider": [
            {"aid": "fb-cookie-1"}
        ]
    },
    "packages": {
        "com.example.game": {
            "version_name": "2.0",
            "meta_data": {"LOCALYTICS_APP_KEY": "app-key-123"},
        }
    },
}


def test_loads_snapshot_from_settings(tmp_path) -> None:  # type: ignore
    path = tmp_path / "device.json"
    path.write_text(json.dumps(DEVICE), encoding="utf-8")

    platform = devsignal.get_platform(
        Settings(snapshot_path=str(path), files_dir=str(tmp_path))
    )
    assert isinstance(platform, SnapshotPlatform)
    assert devsignal.get_api_level(platform) == 16
    assert devsignal.get_android_id(platform) == "a1b2c3d4e5f60718"


def test_collect_datapoints(tmp_path) -> None:  # type: ignore
    path = tmp_path / "device.json"
    path.write_text(json.dumps(DEVICE), encoding="utf-8")
    platform = devsignal.get_platform(
        Settings(snapshot_path=str(path), files_dir=str(tmp_path))
    )

    datapoints = collect_datapoints(platform).to_dict()
    assert datapoints == {
        "api_level": 16,
        "android_id_hash": sha256_buggy("a1b2c3d4e5f60718"),
        "serial_number_hash": sha256_buggy("R32C801XYZ"),
        "telephony_device_id": "358240051111110",
        "wifi_mac_hash": None,
        "network_type": "android_network_type_3",
        "manufacturer": "samsung",
        "fb_attribution": "fb-cookie-1",
        "app_version": "2.0",
        "app_key": "app-key-123",
        "rollup_key": None,
    }


def test_configure_changes_default_settings(tmp_path) -> None:  # type: ignore
    previous = devsignal.get_settings()
    try:
        devsignal.configure(files_dir=str(tmp_path / "files"))
        platform = devsignal.get_platform()
        assert platform.files_dir() == str(tmp_path / "files")
    finally:
        devsignal.configure(**previous.dict())
