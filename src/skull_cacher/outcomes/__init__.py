import threading
from concurrent.futures import Future
from typing import Any, Callable, Dict, List, Optional, Type

from skull_cacher.util.logging import get_logger

from .types import Error, Fail, Outcome, Started, Success

logger = get_logger(__name__)

OutcomeCallback = Callable[[Outcome], Any]


class TextureCallback:
    """Callback with one method per outcome.

    Subclass it and override the methods you care about, then pass an
    instance wherever an outcome callback is accepted.
    """

    def __init__(self):
        self._handlers: Dict[Type[Outcome], Callable[[Outcome], Any]] = {
            Started: lambda outcome: self.start(),
            Success: lambda outcome: self.success(outcome.texture),
            Fail: lambda outcome: self.fail(outcome.reason),
            Error: lambda outcome: self.error(outcome.cause),
        }

    def __call__(self, outcome: Outcome):
        return self._handlers[type(outcome)](outcome)

    def start(self):
        pass

    def success(self, texture):
        pass

    def fail(self, reason=None):
        pass

    def error(self, cause):
        pass


class _Subscriber:
    def __init__(self, callback: Optional[OutcomeCallback]):
        self.callback = callback
        self.future: Future = Future()
        # Callers can no longer cancel once subscribed
        self.future.set_running_or_notify_cancel()

    def deliver(self, outcome: Outcome):
        if self.callback is not None:
            try:
                self.callback(outcome)
            except Exception:
                logger.exception(
                    "Texture callback raised", outcome=outcome.kind.value
                )

        if outcome.terminal:
            self.future.set_result(outcome)


class OutcomeChannel:
    """
    Delivers the outcomes of one texture request to its subscribers.

    Every subscriber sees at most one Started followed by exactly one terminal
    outcome (Success, Fail or Error). Subscribers that join after Started was
    emitted receive it on joining. Callbacks run on whichever thread emits.
    """

    def __init__(self, identifier=None):
        self.identifier = identifier
        self._lock = threading.RLock()
        self._subscribers: List[_Subscriber] = []
        self._started = False
        self._terminal: Optional[Outcome] = None

    @property
    def done(self) -> bool:
        return self._terminal is not None

    def subscribe(self, callback: Optional[OutcomeCallback] = None) -> Future:
        subscriber = _Subscriber(callback)

        with self._lock:
            self._subscribers.append(subscriber)
            if self._started:
                subscriber.deliver(Started())
            if self._terminal is not None:
                subscriber.deliver(self._terminal)

        return subscriber.future

    def emit(self, outcome: Outcome):
        with self._lock:
            if self._terminal is not None:
                logger.warning(
                    "Dropping outcome emitted after completion",
                    identifier=str(self.identifier),
                    outcome=outcome.kind.value,
                )
                return

            if isinstance(outcome, Started):
                if self._started:
                    return
                self._started = True
            else:
                self._terminal = outcome

            for subscriber in self._subscribers:
                subscriber.deliver(outcome)


def resolved(outcome: Outcome, callback: Optional[OutcomeCallback] = None) -> Future:
    """Deliver a terminal outcome right away on the calling thread."""
    channel = OutcomeChannel()
    future = channel.subscribe(callback)
    channel.emit(outcome)
    return future


__all__ = [
    "Outcome",
    "OutcomeCallback",
    "OutcomeChannel",
    "Started",
    "Success",
    "Fail",
    "Error",
    "TextureCallback",
    "resolved",
]
