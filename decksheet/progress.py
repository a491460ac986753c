"""Progress records and the listener protocol used by the pipeline.

The pipeline never keeps a global list of subscribers. Callers pass a
listener in; a ``ProgressChannel`` fans one record out to several.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Progress:
    """Snapshot of a long-running operation.

    ``total == 0`` marks a message-only status with no step count.
    """

    message: str
    current: int = 0
    total: int = 0

    @property
    def steppable(self) -> bool:
        return self.total > 0


class ProgressListener(Protocol):
    """Anything that can receive progress records."""

    def notify(self, progress: Progress) -> None:
        ...


class NullListener:
    """Listener that ignores every record."""

    def notify(self, progress: Progress) -> None:
        pass


class ProgressChannel:
    """Synchronous fan-out of progress records to subscribed listeners.

    Records are delivered in publish order, on the caller's control flow,
    to every listener subscribed at the time of the call.
    """

    def __init__(self, *listeners: ProgressListener):
        self._listeners: list[ProgressListener] = list(listeners)

    def subscribe(self, listener: ProgressListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ProgressListener) -> None:
        self._listeners.remove(listener)

    def publish(self, progress: Progress) -> None:
        logger.debug("progress: %s (%d/%d)", progress.message, progress.current, progress.total)
        for listener in list(self._listeners):
            listener.notify(progress)

    # A channel can be handed to the pipeline wherever a listener is expected.
    notify = publish
