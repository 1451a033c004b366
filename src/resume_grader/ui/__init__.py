"""User interface components.

This subpackage provides terminal UI and output rendering functionality
for the resume grader.

Key modules:
    - progress: Progress callback type and safe notification
    - tui: Rich-based terminal UI for progress display
    - reporting: Result rendering and persistence
"""

from resume_grader.ui.progress import ProgressCallback, OVERVIEW_SOURCE, notify
from resume_grader.ui.tui import TUI, GroupDisplayState
from resume_grader.ui.reporting import (
    render_result_md,
    save_report_md,
    save_result_json,
)

__all__ = [
    "ProgressCallback",
    "OVERVIEW_SOURCE",
    "notify",
    "TUI",
    "GroupDisplayState",
    "render_result_md",
    "save_report_md",
    "save_result_json",
]
