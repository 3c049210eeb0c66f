"""Caller-side keystroke state: the trailing detection window and the
keyboard status (language, caps lock, typing indicator).

The classifier never sees this state; the tracker hands it a snapshot of the
window after every accepted key press.
"""

from __future__ import annotations

import time
from collections import deque
from typing import Callable

from keylang.config import settings
from keylang.models import DEFAULT_LANGUAGE, KeyboardStatus, KeyEvent
from keylang.text.classifier import LanguageClassifier, get_classifier


class DetectionWindow:
    """Last ``capacity`` typed characters, oldest evicted first."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._chars: deque[str] = deque(maxlen=capacity)

    def append(self, char: str) -> None:
        self._chars.append(char)

    def snapshot(self) -> str:
        return "".join(self._chars)

    def clear(self) -> None:
        self._chars.clear()

    def __len__(self) -> int:
        return len(self._chars)


class KeyboardTracker:
    """Turns raw key events into a KeyboardStatus.

    Args:
        classifier: Classifier to run on the window (default: built-in table).
        capacity: Detection window size.
        typing_timeout: Seconds after the last key press before is_typing
            drops back to False.
        clock: Monotonic time source, used when ``now`` is not passed.
    """

    def __init__(
        self,
        classifier: LanguageClassifier | None = None,
        capacity: int | None = None,
        typing_timeout: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.classifier = classifier or get_classifier()
        self.window = DetectionWindow(capacity if capacity is not None else settings.window_capacity)
        self.typing_timeout = typing_timeout if typing_timeout is not None else settings.typing_timeout_seconds
        self._clock = clock
        self._status = KeyboardStatus(language=DEFAULT_LANGUAGE)
        self._last_key_at: float | None = None

    def key_down(self, event: KeyEvent, now: float | None = None) -> KeyboardStatus:
        self._last_key_at = self._clock() if now is None else now
        language = self._status.language
        if event.is_character:
            self.window.append(event.key)
            language = self.classifier.detect(self.window.snapshot())

        self._status = self._status.model_copy(update={
            "caps_lock": event.caps_lock,
            "is_typing": True,
            "last_input": event.key,
            "language": language,
        })
        return self.status(self._last_key_at)

    def key_up(self, event: KeyEvent, now: float | None = None) -> KeyboardStatus:
        self._status = self._status.model_copy(update={"caps_lock": event.caps_lock})
        return self.status(now)

    def status(self, now: float | None = None) -> KeyboardStatus:
        if self._status.is_typing and self._last_key_at is not None:
            now = self._clock() if now is None else now
            if now - self._last_key_at >= self.typing_timeout:
                self._status = self._status.model_copy(update={"is_typing": False})
        return self._status

    def reset(self) -> None:
        self.window.clear()
        self._status = KeyboardStatus(language=DEFAULT_LANGUAGE)
        self._last_key_at = None
