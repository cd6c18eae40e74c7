import sys
from typing import Any, Dict, List, Tuple

import pytest

from devsignal import session as session_module
from devsignal.config import Settings, System
from devsignal.errors import InvalidArgumentError
from devsignal.hashing import sha256_buggy
from devsignal.platform import Platform
from devsignal.platform.snapshot import PackageSnapshot, SnapshotPlatform
from devsignal.session import Session, SessionTransport
from devsignal.test.fixtures import PACKAGE_NAME, make_snapshot

if sys.version_info >= (3, 12):
    from typing import override
else:
    from overrides import overrides as override


class CollectingTransport(SessionTransport):
    uploads: List[Tuple[str, List[Dict[str, Any]]]]

    def __init__(self, system: System) -> None:
        super().__init__(system)
        self.uploads = []

    @override
    def upload(self, app_key: str, sessions: List[Dict[str, Any]]) -> None:
        self.uploads.append((app_key, sessions))


@pytest.fixture
def system(tmp_path) -> System:  # type: ignore
    system = System(
        Settings(
            files_dir=str(tmp_path),
            devsignal_session_transport_impl=f"{__name__}.CollectingTransport",
        )
    )
    platform = system.instance(Platform)
    assert isinstance(platform, SnapshotPlatform)
    platform.load(make_snapshot(secure_settings={"android_id": "a1b2c3d4e5f60718"}))
    system.start()
    return system


def uploads(system: System) -> List[Tuple[str, List[Dict[str, Any]]]]:
    transport = system.instance(SessionTransport)
    assert isinstance(transport, CollectingTransport)
    return transport.uploads


def test_app_key_from_manifest(system: System) -> None:
    assert Session(system).app_key == "app-key-123"


def test_explicit_app_key(system: System) -> None:
    assert Session(system, "explicit-key").app_key == "explicit-key"


def test_app_key_required(system: System) -> None:
    platform = system.instance(Platform)
    assert isinstance(platform, SnapshotPlatform)
    platform.load(make_snapshot(packages={PACKAGE_NAME: PackageSnapshot()}))
    with pytest.raises(InvalidArgumentError):
        Session(system)


def test_open_collects_datapoints(system: System) -> None:
    session = Session(system)
    session.open()
    assert session.is_open
    assert session.datapoints is not None
    assert session.datapoints.android_id_hash == sha256_buggy("a1b2c3d4e5f60718")
    assert session.datapoints.app_version == "1.4.2"
    assert session.datapoints.telephony_device_id is None


def test_open_is_idempotent(system: System) -> None:
    session = Session(system)
    session.open()
    session_id = session.session_id
    session.open()
    assert session.session_id == session_id


def test_upload_without_closed_sessions_sends_nothing(system: System) -> None:
    session = session_module.start(system)
    assert session.is_open
    assert uploads(system) == []


def test_pause_closes_and_uploads(system: System) -> None:
    session = Session(system)
    session.on_resume()
    session_id = session.session_id
    session.on_pause()

    assert not session.is_open
    [(app_key, sessions)] = uploads(system)
    assert app_key == "app-key-123"
    assert [s["session_id"] for s in sessions] == [session_id]
    assert sessions[0]["android_id_hash"] == sha256_buggy("a1b2c3d4e5f60718")


def test_pending_sessions_upload_together(system: System) -> None:
    session = Session(system)
    session.open()
    session.close()
    session.open()
    session.close()
    session.upload()
    session.upload()

    [(_, sessions)] = uploads(system)
    assert len(sessions) == 2


def test_stop(system: System) -> None:
    session = session_module.start(system)
    session_module.stop(session)
    assert not session.is_open
    assert len(uploads(system)) == 1


def test_handles_are_independent(system: System) -> None:
    first = session_module.start(system, "key-a")
    second = session_module.start(system, "key-b")
    session_module.stop(first)
    assert second.is_open
    assert [app_key for app_key, _ in uploads(system)] == ["key-a"]
