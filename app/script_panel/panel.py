"""Read-only panel holding the offline deep-scraper script.

The script is opaque text for the user to run elsewhere. It is read and handed
out verbatim, never inspected or executed here.
"""

import time
from collections.abc import Callable
from pathlib import Path

from app.logging.logger import Log

_DEFAULT_SCRIPT_PATH = Path(__file__).parent / "scripts" / "deep_scraper_script.txt"

COPY_INDICATOR_SECONDS = 2.0


def load_script_text(path: Path | None = None) -> str:
    """Load the script text, trimmed of surrounding blank lines.

    Raises:
        OSError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_SCRIPT_PATH
    return path.read_text(encoding="utf-8").strip()


class CopyIndicator:
    """Transient "copied" flag that reverts after a fixed delay.

    Every trigger restarts the delay, so the flag clears `delay_seconds` after
    the most recent trigger.
    """

    def __init__(
        self,
        delay_seconds: float = COPY_INDICATOR_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._delay_seconds = delay_seconds
        self._clock = clock
        self._expires_at: float | None = None

    @property
    def delay_seconds(self) -> float:
        return self._delay_seconds

    def trigger(self) -> None:
        self._expires_at = self._clock() + self._delay_seconds

    def is_active(self) -> bool:
        if self._expires_at is None:
            return False
        if self._clock() >= self._expires_at:
            self._expires_at = None
            return False
        return True


class ScriptPanel:
    """Holds the script text and the copy action."""

    def __init__(self, script_text: str, indicator: CopyIndicator | None = None) -> None:
        self._script_text = script_text
        self._indicator = indicator or CopyIndicator()

    @property
    def script_text(self) -> str:
        return self._script_text

    @property
    def indicator(self) -> CopyIndicator:
        return self._indicator

    def copy(self) -> str:
        """Arm the copied indicator and return the exact text for the clipboard."""
        self._indicator.trigger()
        Log.debug("Script copied to clipboard")
        return self._script_text
