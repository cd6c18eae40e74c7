from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from devsignal import resolvers
from devsignal.platform import Platform


@dataclass(frozen=True)
class Datapoints:
    """Every identity datapoint of a device, resolved together for one session."""

    api_level: int
    android_id_hash: Optional[str]
    serial_number_hash: Optional[str]
    telephony_device_id: Optional[str]
    wifi_mac_hash: Optional[str]
    network_type: str
    manufacturer: str
    fb_attribution: Optional[str]
    app_version: str
    app_key: Optional[str]
    rollup_key: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def collect_datapoints(platform: Platform) -> Datapoints:
    # Touches the filesystem and content providers; keep off latency-critical paths
    return Datapoints(
        api_level=resolvers.get_api_level(platform),
        android_id_hash=resolvers.get_android_id_hash(platform),
        serial_number_hash=resolvers.get_serial_number_hash(platform),
        telephony_device_id=resolvers.get_telephony_device_id(platform),
        wifi_mac_hash=resolvers.get_wifi_mac_hash(platform),
        network_type=resolvers.get_network_type(platform),
        manufacturer=resolvers.get_manufacturer(platform),
        fb_attribution=resolvers.get_fb_attribution(platform),
        app_version=resolvers.get_app_version(platform),
        app_key=resolvers.get_app_key(platform),
        rollup_key=resolvers.get_rollup_key(platform),
    )
