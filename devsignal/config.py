import importlib
import inspect
import logging
from abc import ABC
from typing import Optional, Any, Dict, List
from typing import Type, TypeVar, cast

from overrides import EnforceOverrides
from overrides import override


in_pydantic_v2 = False
try:
    from pydantic import BaseSettings
except ImportError:
    in_pydantic_v2 = True
    from pydantic.v1 import BaseSettings
    from pydantic.v1 import validator

if not in_pydantic_v2:
    from pydantic import validator  # type: ignore # noqa

logger = logging.getLogger(__name__)


# Map specific abstract types to the setting which specifies which
# concrete implementation to use.
# Please keep these sorted.
_abstract_type_keys: Dict[str, str] = {
    "devsignal.platform.Platform": "devsignal_platform_impl",
    "devsignal.session.SessionTransport": "devsignal_session_transport_impl",
}


class Settings(BaseSettings):  # type: ignore
    # ==============
    # Generic config
    # ==============

    environment: str = ""

    # ==============
    # Platform
    # ==============

    devsignal_platform_impl: str = "devsignal.platform.snapshot.SnapshotPlatform"

    @validator("snapshot_path", pre=True, always=True, allow_reuse=True)
    def empty_str_to_none(cls, v: str) -> Optional[str]:
        if type(v) is str and v.strip() == "":
            return None
        return v

    # JSON document describing the device state SnapshotPlatform serves
    snapshot_path: Optional[str] = None
    # Private storage root of the host application, used when the snapshot
    # doesn't name one
    files_dir: str = "./devsignal"

    # ==============
    # Session
    # ==============

    devsignal_session_transport_impl: str = "devsignal.session.LoggingTransport"

    allow_reset: bool = False

    # =======
    # Methods
    # =======

    def require(self, key: str) -> Any:
        """Return the value of a required config key, or raise an exception if it is not
        set"""
        val = self[key]
        if val is None:
            raise ValueError(f"Missing required config value '{key}'")
        return val

    def __getitem__(self, key: str) -> Any:
        return getattr(self, key)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


T = TypeVar("T", bound="Component")


class Component(ABC, EnforceOverrides):
    """A piece of the host boundary (a Platform, a SessionTransport) whose concrete
    class is chosen by Settings and shared across one System."""

    _system: "System"
    _running: bool

    def __init__(self, system: "System"):
        self._system = system
        self._running = False

    def start(self) -> None:
        logger.debug(f"Starting component {self.__class__.__name__}")
        self._running = True

    def stop(self) -> None:
        logger.debug(f"Stopping component {self.__class__.__name__}")
        self._running = False

    def reset_state(self) -> None:
        """Return to a blank state. Only intended to be called from tests."""
        logger.debug(f"Resetting component {self.__class__.__name__}")


class System(Component):
    settings: Settings
    _instances: Dict[Type[Component], Component]

    def __init__(self, settings: Settings):
        self.settings = settings
        self._instances = {}
        super().__init__(self)

    def instance(self, type: Type[T]) -> T:
        """Return the shared instance of `type`, resolving abstract boundary types to
        the implementation named in settings. Instances created while the system
        is running are started immediately."""
        if inspect.isabstract(type):
            type_fqn = get_fqn(type)
            if type_fqn not in _abstract_type_keys:
                raise ValueError(f"Cannot instantiate abstract type: {type}")
            type = get_class(self.settings.require(_abstract_type_keys[type_fqn]), type)

        if type not in self._instances:
            impl = type(self)
            self._instances[type] = impl
            if self._running:
                impl.start()

        return cast(T, self._instances[type])

    def components(self) -> List[Component]:
        """Components in the order they were created."""
        return list(self._instances.values())

    @override
    def start(self) -> None:
        super().start()
        for component in self.components():
            component.start()

    @override
    def stop(self) -> None:
        super().stop()
        for component in reversed(self.components()):
            component.stop()

    @override
    def reset_state(self) -> None:
        if not self.settings.allow_reset:
            raise ValueError(
                "Resetting is not allowed by this configuration (to enable it, set `allow_reset` to `True` in your Settings() or include `ALLOW_RESET=TRUE` in your environment variables)"
            )
        for component in reversed(self.components()):
            component.reset_state()


C = TypeVar("C")


def get_class(fqn: str, type: Type[C]) -> Type[C]:
    """Given a fully qualifed class name, import the module and return the class"""
    module_name, class_name = fqn.rsplit(".", 1)
    module = importlib.import_module(module_name)
    return cast(Type[C], getattr(module, class_name))


def get_fqn(cls: Type[object]) -> str:
    return f"{cls.__module__}.{cls.__name__}"
