"""Interactive runtime: the event loop and the bootstrap that feeds it."""

from __future__ import annotations

from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, ViewerSession, run_main_loop


def run_viewer(*args, **kwargs):
    """Import the bootstrap on first use so ``import lazyhex.runtime`` stays cheap."""
    from .app import run_viewer as _run_viewer

    return _run_viewer(*args, **kwargs)


__all__ = [
    "RuntimeLoopCallbacks",
    "RuntimeLoopTiming",
    "ViewerSession",
    "run_main_loop",
    "run_viewer",
]
