"""
Live theme application for the theme editor.

Two pieces:

1. Applying token maps as CSS custom properties on the light (``:root``)
   and dark (``.dark``) scopes of a style target.
2. Frame coalescing for continuous inputs. A native color picker fires on
   every pointer move while dragging; updates are collapsed to at most one
   apply per frame, with the newest value replacing any pending one.
   Text input applies on every keystroke without coalescing.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any, Generic, Protocol, TypeVar

from themeport.core.color_convert import picker_hex
from themeport.core.css_export import DARK_SELECTOR, LIGHT_SELECTOR, render_block
from themeport.core.ir.tokens import NON_COLOR_TOKENS, ThemeVariant

logger = logging.getLogger(__name__)

T = TypeVar("T")

# One frame at 60 Hz
DEFAULT_FRAME_INTERVAL = 1.0 / 60.0


# =============================================================================
# Frame scheduling
# =============================================================================


class FrameScheduler(Protocol):
    """Schedules callbacks for the next rendering frame."""

    def request_frame(self, callback: Callable[[], None]) -> Any:
        """Run ``callback`` on the next frame; return a cancellable handle."""
        ...

    def cancel_frame(self, handle: Any) -> None:
        """Withdraw a callback that has not fired yet."""
        ...


class TimerFrameScheduler:
    """Frame scheduler backed by ``threading.Timer``.

    Callbacks run on a timer thread roughly one frame interval later.
    """

    def __init__(self, frame_interval: float = DEFAULT_FRAME_INTERVAL):
        self.frame_interval = frame_interval

    def request_frame(self, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(self.frame_interval, callback)
        timer.daemon = True
        timer.start()
        return timer

    def cancel_frame(self, handle: threading.Timer) -> None:
        handle.cancel()


class ManualFrameScheduler:
    """Frame scheduler driven explicitly by ``run_frame()``.

    For headless rendering loops and tests: nothing fires until the owner
    advances a frame.
    """

    def __init__(self) -> None:
        self._next_handle = 0
        self._callbacks: dict[int, Callable[[], None]] = {}

    def request_frame(self, callback: Callable[[], None]) -> int:
        self._next_handle += 1
        self._callbacks[self._next_handle] = callback
        return self._next_handle

    def cancel_frame(self, handle: int) -> None:
        self._callbacks.pop(handle, None)

    @property
    def pending_count(self) -> int:
        return len(self._callbacks)

    def run_frame(self) -> int:
        """Fire every callback requested before this frame.

        Returns:
            Number of callbacks run.
        """
        callbacks = list(self._callbacks.values())
        self._callbacks.clear()
        for callback in callbacks:
            callback()
        return len(callbacks)


class FrameCoalescer(Generic[T]):
    """Collapses rapid updates into at most one ``apply`` per frame.

    Holds at most one pending frame. ``submit`` cancels it and schedules a
    new one carrying the latest value (last write wins, nothing queues).
    ``cancel`` must be called when the owner is torn down so no callback
    fires against dead state.
    """

    def __init__(self, scheduler: FrameScheduler, apply: Callable[[T], None]):
        self._scheduler = scheduler
        self._apply = apply
        self._lock = threading.Lock()
        self._handle: Any = None
        self._generation = 0
        self._applied_generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._handle is not None

    def submit(self, value: T) -> None:
        """Schedule ``value`` for the next frame, replacing any pending value.

        The scheduler is called without holding the lock, so a scheduler that
        runs the callback synchronously applies ``value`` immediately.
        """
        with self._lock:
            previous, self._handle = self._handle, None
            self._generation += 1
            generation = self._generation
        if previous is not None:
            self._scheduler.cancel_frame(previous)

        handle = self._scheduler.request_frame(lambda: self._fire(generation, value))
        with self._lock:
            if generation == self._generation and self._applied_generation != generation:
                self._handle = handle

    def cancel(self) -> None:
        """Withdraw the pending update, if any."""
        with self._lock:
            previous, self._handle = self._handle, None
            self._generation += 1
        if previous is not None:
            self._scheduler.cancel_frame(previous)

    def _fire(self, generation: int, value: T) -> None:
        with self._lock:
            # A timer may already be running when it gets cancelled
            if generation != self._generation:
                return
            self._handle = None
            self._applied_generation = generation
        self._apply(value)


# =============================================================================
# Editor control
# =============================================================================


class ColorTokenControl:
    """Editing state for one token: a color picker plus a text field.

    Picker changes are frame-coalesced; text changes apply immediately.
    ``shadow-focus`` has no picker since its value is a box-shadow.
    """

    def __init__(
        self,
        key: str,
        value: str,
        on_change: Callable[[str, str], None],
        scheduler: FrameScheduler,
    ):
        self.key = key
        self.value = value
        self._on_change = on_change
        self._coalescer: FrameCoalescer[str] = FrameCoalescer(scheduler, self._commit)

    @property
    def is_color_picker_enabled(self) -> bool:
        return self.key not in NON_COLOR_TOKENS

    @property
    def picker_value(self) -> str:
        """Hex shown in the picker; the token value itself stays as authored."""
        return picker_hex(self.value)

    def picker_changed(self, hex_value: str) -> None:
        if not self.is_color_picker_enabled:
            logger.debug(f"Ignoring picker input for non-color token {self.key}")
            return
        self._coalescer.submit(hex_value)

    def text_changed(self, value: str) -> None:
        # A typed value supersedes an in-flight drag
        self._coalescer.cancel()
        self._commit(value)

    def close(self) -> None:
        self._coalescer.cancel()

    def _commit(self, value: str) -> None:
        self.value = value
        self._on_change(self.key, value)


# =============================================================================
# Applying tokens
# =============================================================================


class TokenTarget(Protocol):
    """Something that accepts CSS custom properties per scope selector."""

    def set_property(self, scope: str, name: str, value: str) -> None: ...


class StyleSheetTarget:
    """In-memory style target that renders the applied properties as CSS."""

    def __init__(self) -> None:
        self._scopes: dict[str, dict[str, str]] = {}

    def set_property(self, scope: str, name: str, value: str) -> None:
        self._scopes.setdefault(scope, {})[name] = value

    def get_property(self, scope: str, name: str) -> str | None:
        return self._scopes.get(scope, {}).get(name)

    def scope(self, scope: str) -> dict[str, str]:
        return dict(self._scopes.get(scope, {}))

    def to_css(self) -> str:
        blocks = []
        for selector, properties in self._scopes.items():
            tokens = {name.removeprefix("--"): value for name, value in properties.items()}
            blocks.append(render_block(selector, tokens))
        return "\n\n".join(blocks) + ("\n" if blocks else "")


SCOPE_SELECTORS: dict[ThemeVariant, str] = {
    ThemeVariant.LIGHT: LIGHT_SELECTOR,
    ThemeVariant.DARK: DARK_SELECTOR,
}


def apply_variant_tokens(
    target: TokenTarget,
    variant: ThemeVariant,
    tokens: Mapping[str, str],
) -> None:
    """Write one variant's tokens as ``--key`` properties on its scope."""
    scope = SCOPE_SELECTORS[variant]
    for key, value in tokens.items():
        target.set_property(scope, f"--{key}", value)


def apply_theme_tokens(
    target: TokenTarget,
    light: Mapping[str, str],
    dark: Mapping[str, str],
) -> None:
    """Apply light and dark token maps to ``target``.

    Values are applied as authored; no hex conversion happens here.
    """
    apply_variant_tokens(target, ThemeVariant.LIGHT, light)
    apply_variant_tokens(target, ThemeVariant.DARK, dark)
    logger.debug(f"Applied {len(light)} light and {len(dark)} dark tokens")
