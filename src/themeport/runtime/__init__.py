"""Runtime helpers for live theme editing."""

from .live_apply import (
    ColorTokenControl,
    FrameCoalescer,
    FrameScheduler,
    ManualFrameScheduler,
    StyleSheetTarget,
    TimerFrameScheduler,
    TokenTarget,
    apply_theme_tokens,
)

__all__ = [
    "ColorTokenControl",
    "FrameCoalescer",
    "FrameScheduler",
    "ManualFrameScheduler",
    "StyleSheetTarget",
    "TimerFrameScheduler",
    "TokenTarget",
    "apply_theme_tokens",
]
