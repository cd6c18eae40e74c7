import os
from pathlib import Path
from typing import Generator

import hypothesis
import pytest

from devsignal.config import Settings, System
from devsignal.platform import Platform
from devsignal.platform.snapshot import SnapshotPlatform
from devsignal.test.fixtures import make_snapshot

VALID_PRESETS = ["fast", "normal", "slow"]
CURRENT_PRESET = os.getenv("PROPERTY_TESTING_PRESET", "fast")

if CURRENT_PRESET not in VALID_PRESETS:
    raise ValueError(
        f"Invalid property testing preset: {CURRENT_PRESET}. Must be one of {VALID_PRESETS}."
    )

hypothesis.settings.register_profile(
    "base",
    deadline=None,
    suppress_health_check=[hypothesis.HealthCheck.function_scoped_fixture],
)
hypothesis.settings.register_profile(
    "fast", hypothesis.settings.get_profile("base"), max_examples=50
)
# Hypothesis's default max_examples is 100
hypothesis.settings.register_profile(
    "normal", hypothesis.settings.get_profile("base"), max_examples=100
)
hypothesis.settings.register_profile(
    "slow", hypothesis.settings.get_profile("base"), max_examples=500
)
hypothesis.settings.load_profile(CURRENT_PRESET)


@pytest.fixture
def system(tmp_path: Path) -> Generator[System, None, None]:
    settings = Settings(
        files_dir=str(tmp_path),
        allow_reset=True,
    )
    system = System(settings)
    system.start()
    yield system
    system.stop()


@pytest.fixture
def platform(system: System) -> SnapshotPlatform:
    platform = system.instance(Platform)
    assert isinstance(platform, SnapshotPlatform)
    platform.load(make_snapshot())
    return platform
