"""
Progress side channel.

The engine reports lifecycle events through an optional callback taking
``(source, message)`` where ``source`` is a rubric group name or
``"overview"``. Callbacks are advisory: a failing callback is logged and
never interrupts an evaluation.
"""

from __future__ import annotations

from typing import Callable, Optional

from resume_grader.utils.logging import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[str, str], None]

OVERVIEW_SOURCE = "overview"


def notify(progress_cb: Optional[ProgressCallback], source: str,
           msg: str) -> None:
	"""Invoke the progress callback, if any, ignoring its failures."""
	if not progress_cb:
		return
	try:
		progress_cb(source, msg)
	except Exception:
		logger.debug("progress callback failed for %s", source,
		             exc_info=True)


__all__ = ["ProgressCallback", "OVERVIEW_SOURCE", "notify"]
