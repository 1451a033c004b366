"""
Terminal UI for evaluation progress visualization.

Provides a Rich-based TUI showing the concurrent rubric group
evaluations and the overview call, followed by the final score card.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

from rich import box
from rich.console import Console, Group
from rich.live import Live
from rich.table import Table
from rich.text import Text

from resume_grader.models.evaluation import EvaluationResult
from resume_grader.models.summary import ScoreCardData, build_score_card
from resume_grader.ui.progress import OVERVIEW_SOURCE

_MAX_MESSAGES = 6

_GRADE_STYLES = {
    "Excellent": "bold green",
    "Strong": "green",
    "Fair": "yellow",
    "Weak": "red",
    "Needs Work": "bold red",
}


@dataclass
class GroupDisplayState:
	"""State for a single group column in the TUI."""

	source: str
	status: str = "pending"  # pending|running|retrying|completed|failed
	failed_attempts: int = 0
	messages: deque[str] = field(
	    default_factory=lambda: deque(maxlen=_MAX_MESSAGES))

	def add_message(self, msg: str) -> None:
		"""Add a message to the scrolling log."""
		self.messages.append(msg)

	def render_cell(self) -> Text:
		"""Render cell content for display."""
		text = Text()
		text.append(f"status: {self.status}\n", style="bold")
		if self.failed_attempts:
			text.append(f"failed attempts: {self.failed_attempts}\n",
			            style="yellow")
		for msg in self.messages:
			clean = msg.strip()
			if "failed" in clean or "fallback" in clean:
				text.append(f"• {clean}\n", style="red")
			elif clean.endswith("_completed"):
				text.append(f"• {clean}\n", style="green")
			else:
				text.append(f"• {clean}\n", style="dim")
		return text


class TUI:
	"""
	Rich-based TUI for streaming evaluation progress.

	Uses Rich's Live display with auto-refresh to update in place.
	"""

	def __init__(self, group_names: Sequence[str], show_usage: bool = False,
	             console: Console | None = None):
		self.console = console or Console()
		self.group_names = list(group_names)
		self.show_usage = show_usage
		self.states: dict[str, GroupDisplayState] = {
		    name: GroupDisplayState(source=name) for name in self.group_names
		}
		self.states[OVERVIEW_SOURCE] = GroupDisplayState(source=OVERVIEW_SOURCE)
		self.live: Live | None = None

	def _build_table(self) -> Group:
		"""Build the display tables."""
		groups_table = Table(box=box.ROUNDED, expand=True, show_header=True)
		for name in self.group_names:
			groups_table.add_column(name, min_width=18)
		groups_table.add_row(
		    *[self.states[name].render_cell() for name in self.group_names])

		overview_table = Table(box=box.ROUNDED, expand=True, show_header=True)
		overview_table.add_column("Overview", min_width=30)
		overview_table.add_row(self.states[OVERVIEW_SOURCE].render_cell())
		return Group(groups_table, overview_table)

	def __enter__(self):
		"""Start the Live display."""
		self.live = Live(
		    self._build_table(),
		    console=self.console,
		    refresh_per_second=4,
		)
		self.live.start()
		return self

	def __exit__(self, exc_type, exc, tb):
		"""Stop the Live display."""
		if self.live:
			self.live.stop()

	def update(self, source: str, msg: str) -> None:
		"""Update state for a group or the overview and refresh display."""
		state = self.states.get(source)
		if not state:
			return

		if msg.startswith(("group_started", "overview_started")):
			state.status = "running"
		elif msg.startswith("attempt_failed"):
			state.status = "retrying"
			state.failed_attempts += 1
		elif msg.startswith(("group_completed", "overview_completed")):
			state.status = "completed"
		elif msg.startswith("overview_fallback"):
			state.status = "fallback"
		elif msg.startswith("group_failed"):
			state.status = "failed"
		state.add_message(msg)

		if self.live:
			self.live.update(self._build_table())

	def finalize(self):
		"""Stop the live display."""
		if self.live:
			self.live.stop()

	def print_summary(self, result: EvaluationResult) -> None:
		"""Print the final score card after the evaluation completes."""
		self.finalize()
		self.console.print()
		self._render_summary(build_score_card(result, self.show_usage))

	def _render_summary(self, data: ScoreCardData) -> None:
		"""Render the score card to console using pre-extracted data."""
		card = Table(
		    title="Resume Score",
		    box=box.ROUNDED,
		    show_header=False,
		    expand=True,
		    title_style="bold cyan",
		)
		card.add_column("Field", style="bold")
		card.add_column("Value")
		card.add_row("Score", f"{data.final_score:.1f} / 100")
		card.add_row(
		    "Grade", Text(data.grade, style=_GRADE_STYLES.get(data.grade, "")))
		card.add_row(
		    "Penalty",
		    f"{data.total_weighted_penalty} / {data.max_possible_penalty}")
		card.add_row("Overview", data.overview)
		for i, fix in enumerate(data.top_fixes, start=1):
			card.add_row(f"Fix {i}", fix)
		self.console.print(card)

		for category in data.categories:
			table = Table(
			    title=(f"{category.category} "
			           f"({category.weighted_penalty}/{category.max_penalty})"),
			    box=box.ROUNDED,
			    expand=True,
			    title_style="bold yellow",
			)
			table.add_column("Rule")
			table.add_column("Weight", justify="right")
			table.add_column("Penalty", justify="right")
			table.add_column("Weighted", justify="right")
			table.add_column("Suggestion")
			for verdict in category.rules:
				style = "red" if verdict.penalty >= 7 else (
				    "yellow" if verdict.penalty >= 3 else "green")
				table.add_row(
				    verdict.rule,
				    str(verdict.weight),
				    Text(str(verdict.penalty), style=style),
				    str(verdict.weighted_penalty),
				    verdict.suggestion,
				)
			self.console.print(table)

		if data.usage:
			usage_table = Table(show_header=True, expand=True, box=box.ROUNDED)
			usage_table.add_column("Prompt")
			usage_table.add_column("Completion")
			usage_table.add_column("Total")
			usage_table.add_column("Cost (USD)")
			usage_table.add_row(
			    str(data.usage.prompt_tokens),
			    str(data.usage.completion_tokens),
			    str(data.usage.total_tokens),
			    f"{data.usage.cost_usd:g}",
			)
			self.console.print("\n[bold]Usage[/bold]")
			self.console.print(usage_table)


__all__ = ["TUI", "GroupDisplayState"]
