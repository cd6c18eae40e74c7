import logging
import uuid
from abc import abstractmethod
from typing import Any, Dict, List, Optional

from overrides import override

from devsignal.config import Component, System
from devsignal.datapoints import Datapoints, collect_datapoints
from devsignal.errors import InvalidArgumentError
from devsignal.platform import Platform
from devsignal.resolvers import get_app_key

logger = logging.getLogger(__name__)


class SessionTransport(Component):
    """Hands closed sessions to whatever persists and uploads them."""

    def __init__(self, system: System) -> None:
        super().__init__(system)

    @abstractmethod
    def upload(self, app_key: str, sessions: List[Dict[str, Any]]) -> None:
        pass


class LoggingTransport(SessionTransport):
    @override
    def upload(self, app_key: str, sessions: List[Dict[str, Any]]) -> None:
        for session in sessions:
            logger.info(
                f"Would upload session {session['session_id']} for app key {app_key}"
            )


class Session:
    """
    An analytics session handle. The host application owns it and drives it
    from its lifecycle: on_resume() opens it, on_pause() closes and uploads.
    """

    def __init__(self, system: System, app_key: Optional[str] = None):
        self._platform = system.instance(Platform)
        self._transport = system.instance(SessionTransport)
        if app_key is None:
            app_key = get_app_key(self._platform)
        if not app_key:
            raise InvalidArgumentError("app_key cannot be empty")
        self.app_key = app_key
        self.session_id: Optional[str] = None
        self.datapoints: Optional[Datapoints] = None
        self._pending: List[Dict[str, Any]] = []

    @property
    def is_open(self) -> bool:
        return self.session_id is not None

    def open(self) -> None:
        if self.is_open:
            logger.debug(f"Session {self.session_id} already open")
            return
        self.session_id = str(uuid.uuid4())
        self.datapoints = collect_datapoints(self._platform)
        logger.debug(f"Opened session {self.session_id}")

    def close(self) -> None:
        if not self.is_open:
            return
        assert self.datapoints is not None
        self._pending.append(
            {"session_id": self.session_id, **self.datapoints.to_dict()}
        )
        logger.debug(f"Closed session {self.session_id}")
        self.session_id = None
        self.datapoints = None

    def upload(self) -> None:
        if not self._pending:
            return
        sessions, self._pending = self._pending, []
        self._transport.upload(self.app_key, sessions)

    def on_resume(self) -> None:
        self.open()

    def on_pause(self) -> None:
        self.close()
        self.upload()


def start(system: System, app_key: Optional[str] = None) -> Session:
    session = Session(system, app_key)
    session.open()
    session.upload()
    return session


def stop(session: Session) -> None:
    session.close()
    session.upload()
