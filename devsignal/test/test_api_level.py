from typing import Any

import hypothesis.strategies as st
from hypothesis import given

from devsignal.api_level import OLDEST_API_LEVEL, get_api_level
from devsignal.platform.snapshot import SnapshotPlatform
from devsignal.test.fixtures import make_snapshot


def test_reads_sdk_string(platform: SnapshotPlatform) -> None:
    platform.load(make_snapshot(version_fields={"SDK": "19", "SDK_INT": 21}))
    assert get_api_level(platform) == 19


def test_falls_back_to_sdk_int(platform: SnapshotPlatform) -> None:
    platform.load(make_snapshot(version_fields={"SDK_INT": 21}))
    assert get_api_level(platform) == 21


def test_falls_back_when_sdk_is_garbage(platform: SnapshotPlatform) -> None:
    platform.load(make_snapshot(version_fields={"SDK": "REL", "SDK_INT": 16}))
    assert get_api_level(platform) == 16


def test_defaults_to_oldest(platform: SnapshotPlatform) -> None:
    platform.load(make_snapshot(version_fields={}))
    assert get_api_level(platform) == OLDEST_API_LEVEL


field_values = st.one_of(
    st.none(), st.text(), st.integers(), st.floats(allow_nan=True), st.booleans()
)


@given(sdk=field_values, sdk_int=field_values)
def test_never_raises(platform: SnapshotPlatform, sdk: Any, sdk_int: Any) -> None:
    platform.load(make_snapshot(version_fields={"SDK": sdk, "SDK_INT": sdk_int}))
    level = get_api_level(platform)
    assert isinstance(level, int)
    assert level >= OLDEST_API_LEVEL
