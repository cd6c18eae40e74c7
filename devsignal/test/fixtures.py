from devsignal.platform.snapshot import PackageSnapshot, PlatformSnapshot

PACKAGE_NAME = "com.example.game"


def make_snapshot(**kwargs) -> PlatformSnapshot:  # type: ignore
    """A reasonably modern device with its own package installed."""
    defaults = dict(
        package_name=PACKAGE_NAME,
        packages={
            PACKAGE_NAME: PackageSnapshot(
                version_name="1.4.2",
                meta_data={"LOCALYTICS_APP_KEY": "app-key-123"},
            )
        },
    )
    defaults.update(kwargs)
    return PlatformSnapshot(**defaults)
