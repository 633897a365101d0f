"""Default notification sink: records notices and sounds, fans out to subscribers."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

logger = logging.getLogger(__name__)


class NoticeKind(StrEnum):
    MONEY_TAKE = "money_take"
    MONEY_GIVE = "money_give"
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class Notice:
    kind: str
    message: str


_Handler = Callable[[Notice], None]


class NoticeBoard:
    """Fire-and-forget notifier.

    Notices are delivered to subscribers immediately, in subscription order,
    and kept in ``history``. ``finished`` flips once the campaign ends and
    stays set.
    """

    def __init__(self) -> None:
        self._subscribers: list[_Handler] = []
        self.history: list[Notice] = []
        self.sounds: list[str] = []
        self.finished: bool = False

    def subscribe(self, handler: _Handler) -> None:
        self._subscribers.append(handler)

    def unsubscribe(self, handler: _Handler) -> None:
        try:
            self._subscribers.remove(handler)
        except ValueError:
            pass

    def notify(self, kind: str, message: str) -> None:
        notice = Notice(kind=kind, message=message)
        self.history.append(notice)
        logger.debug("notice [%s] %s", kind, message)
        for handler in list(self._subscribers):
            handler(notice)

    def play_sound(self, effect: str) -> None:
        self.sounds.append(effect)

    def finish(self) -> None:
        self.finished = True

    def messages(self, kind: str | None = None) -> list[str]:
        return [n.message for n in self.history if kind is None or n.kind == kind]

    def clear(self) -> None:
        self.history.clear()
        self.sounds.clear()
