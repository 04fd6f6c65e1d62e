"""State of a progress display: determinate, indeterminate or busy."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

BUSY_ICONS = ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷")
ELAPSED_PREFIX = "Elapsed: "
ANIMATION_INTERVAL_MS = 50


class ProgressMode(Enum):
    DETERMINATE = "determinate"
    INDETERMINATE = "indeterminate"
    BUSY = "busy"


def format_time(milliseconds: int) -> str:
    """Format a duration in milliseconds as ``HH:MM:SS``."""
    if milliseconds < 0:
        raise ValueError("duration must not be negative")
    seconds = milliseconds // 1000
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


@dataclass
class ProgressTracker:
    """Progress state driven by explicit calls and animation ticks.

    ``value`` is None while the bar shows no progress. ``accepted`` is None
    while the display is open, True once finished and closed, False once
    cancelled.
    """

    title: str = "Processing..."
    message: str = "Please wait..."
    mode: ProgressMode = ProgressMode.DETERMINATE
    auto_close: bool = True
    cancel_button_visible: bool = True
    on_cancel: Callable[[], None] | None = None
    minimum: int = 0
    maximum: int = 100
    value: int | None = None
    text_visible: bool = True
    bar_visible: bool = True
    canceled: bool = False
    animating: bool = False
    shown: bool = False
    accepted: bool | None = None
    animation_step: int = 0
    elapsed_text: str = field(default=ELAPSED_PREFIX + "00:00:00")
    _elapsed_valid: bool = field(default=False, repr=False)

    def set_mode(self, mode: ProgressMode) -> None:
        self.mode = mode
        if mode is ProgressMode.DETERMINATE:
            self._bar_range(0, 100)
            self.text_visible = True
            self.bar_visible = True
        elif mode is ProgressMode.INDETERMINATE:
            self._bar_range(0, 0)
            self.text_visible = False
            self.bar_visible = True
        else:
            self.bar_visible = False

    def _bar_range(self, minimum: int, maximum: int) -> None:
        self.minimum = minimum
        self.maximum = max(minimum, maximum)
        if self.value is not None and not self.minimum <= self.value <= self.maximum:
            self.value = None

    def _bar_value(self, value: int) -> None:
        open_range = self.minimum == 0 and self.maximum == 0
        if open_range or self.minimum <= value <= self.maximum:
            self.value = value

    def set_range(self, minimum: int, maximum: int) -> None:
        """Set the bar range; only honoured in determinate mode."""
        if self.mode is ProgressMode.DETERMINATE:
            self._bar_range(minimum, maximum)

    def set_value(self, value: int) -> None:
        """Set the bar value; ignored outside determinate mode or out of range."""
        if self.mode is ProgressMode.DETERMINATE:
            self._bar_value(value)

    def set_message(self, message: str) -> None:
        self.message = message

    def reset(self) -> None:
        self.canceled = False
        self.value = None
        self.animating = False
        self._elapsed_valid = False
        self.elapsed_text = ELAPSED_PREFIX + format_time(0)

    def start(self) -> None:
        self.reset()
        self._elapsed_valid = True
        self.accepted = None
        if self.mode in (ProgressMode.INDETERMINATE, ProgressMode.BUSY):
            self.animating = True
        self.shown = True

    def finish(self) -> None:
        self.animating = False
        if self.auto_close:
            self.accepted = True
            self.shown = False
        elif self.mode is ProgressMode.DETERMINATE:
            self.value = self.maximum

    def cancel(self) -> None:
        self.canceled = True
        self.animating = False
        if self.on_cancel is not None:
            self.on_cancel()
        self.accepted = False
        self.shown = False

    def tick(self, elapsed_ms: int) -> None:
        """Advance the animation by one timer firing; no effect unless animating."""
        if not self.animating:
            return
        if self._elapsed_valid:
            self.elapsed_text = ELAPSED_PREFIX + format_time(elapsed_ms)
        if self.mode is ProgressMode.INDETERMINATE:
            self.animation_step = (self.animation_step + 1) % 100
            self._bar_value(self.animation_step)
        elif self.mode is ProgressMode.BUSY:
            self.animation_step = (self.animation_step + 1) % len(BUSY_ICONS)
            message = self.message
            if message.startswith("[") and len(message) > 3:
                message = message[3:].strip()
            self.message = f"[{BUSY_ICONS[self.animation_step]}] {message}"