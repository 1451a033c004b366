from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from typer.main import get_command

from resume_grader.core.partition import RUBRIC_GROUPS
from resume_grader.core.runner import evaluate_resume
from resume_grader.errors import ResumeGraderError
from resume_grader.loaders.resume import load_resume_text
from resume_grader.models.config import Config, load_env
from resume_grader.models.evaluation import EvaluationResult
from resume_grader.models.run_params import RunParams
from resume_grader.ui.reporting import (
    render_result_md,
    save_report_md,
    save_result_json,
)
from resume_grader.ui.tui import TUI
from resume_grader.utils.logging import configure_logging

cli = typer.Typer(add_completion=False, no_args_is_help=True)


@cli.callback()
def root() -> None:
	"""
	Root callback for the resume-grader CLI.

	Sets up the Typer application with no-args-is-help behavior.
	"""
	return None


def write_output(path: Path, result: EvaluationResult) -> None:
	"""Persist the result as JSON for ``.json`` paths, markdown otherwise."""
	if path.suffix.lower() == ".json":
		save_result_json(path, result)
	else:
		save_report_md(path, render_result_md(result))


def run_impl(
    resume_path: str,
    model: str | None = None,
    max_retries: int | None = None,
    timeout: float | None = None,
    show_usage: bool | None = None,
    output: str | None = None,
) -> None:
	"""
	Score one resume file against the rubric.

	Loads configuration, extracts the resume text, evaluates all rubric
	groups concurrently and displays the score card in the TUI.

	Parameters:
		resume_path: Path to a plain-text or markdown resume.
		model: Override for the model name.
		max_retries: Override for the per-group retry budget.
		timeout: Override for the per-attempt timeout in seconds.
		show_usage: Whether to show token/cost metrics.
		output: Optional file to write the result to.
	"""
	load_env()
	try:
		config = Config()
		params = RunParams(
		    resume_path=Path(resume_path),
		    model=model,
		    max_retries=max_retries,
		    timeout=timeout,
		    show_usage=show_usage,
		    output=Path(output) if output else None,
		)
	except ValidationError as exc:
		typer.echo(f"Invalid configuration: {exc}", err=True)
		raise typer.Exit(2) from exc
	config.apply_overrides(params)
	configure_logging(config.log_level)
	typer.echo(f"Running with model={config.model}, "
	           f"max_retries={config.max_retries}, "
	           f"attempt_timeout={config.attempt_timeout_seconds:g}s, "
	           f"resume={params.resume_path}")

	try:
		resume_text = load_resume_text(params.resume_path)
		with TUI([name for name, _ in RUBRIC_GROUPS],
		         show_usage=config.show_usage) as ui:
			result = asyncio.run(
			    evaluate_resume(config, resume_text, progress_cb=ui.update))
			ui.print_summary(result)
	except ResumeGraderError as exc:
		typer.echo(json.dumps(exc.to_dict(), indent=2), err=True)
		raise typer.Exit(1) from exc

	if params.output:
		write_output(params.output, result)
		typer.echo(f"Result written to {params.output}")


@cli.command()
def score(
    resume_path: str,
    model: str = typer.Option(None, "--model", help="Override model name"),
    max_retries: int = typer.Option(None, "--max-retries",
                                    help="Override retries per rule group"),
    timeout: float = typer.Option(None, "--timeout",
                                  help="Override per-attempt timeout seconds"),
    show_usage: bool = typer.Option(
        None,
        "--show-usage/--no-show-usage",
        help="Show token/cost usage metrics",
    ),
    output: str = typer.Option(
        None, "--output", "-o",
        help="Write the result to a .json or markdown file"),
) -> None:
	"""
	Score a resume file against the 28-rule rubric.

	This is the main CLI command of the resume grader.
	"""
	run_impl(resume_path, model, max_retries, timeout, show_usage, output)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `score` when appropriate.

	Allows calling 'resume-grader resume.md' without explicitly
	specifying the 'score' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if args and args[0] == "score":
		args = args[1:]
	if args and not args[0].startswith("-") and args[0] not in commands:
		args = ["score"] + args
	return _click_app.main(
	    args=args,
	    prog_name="resume-grader",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
