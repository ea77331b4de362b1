"""Investment events and an in-process emitter"""

import logging
from dataclasses import dataclass, asdict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvestmentAdded:
    """Emitted after a deposit has been fully dispatched"""

    account: str
    token: str
    amount: int
    period: int

    name = "InvestmentAdded"


@dataclass(frozen=True)
class InvestmentRemoved:
    """Emitted after a withdrawal has been dispatched"""

    account: str
    token: str
    fraction: int

    name = "InvestmentRemoved"


class EventEmitter:
    """Records emitted events and fans them out to subscribers"""

    def __init__(self):
        self.history = []
        self._subscribers = []

    def subscribe(self, callback):
        """
        Register a callback invoked with every emitted event.

        Returns:
            The callback, so this can be used as a decorator
        """
        self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback):
        self._subscribers.remove(callback)

    def emit(self, event):
        logger.info("%s %s", event.name, asdict(event))
        self.history.append(event)
        for callback in list(self._subscribers):
            callback(event)
        return event
