"""
Resume Grader - Rubric-based resume evaluation with a reasoning service.

This package grades a resume against a fixed 28-rule rubric by running
five rule groups concurrently against an OpenAI-compatible chat endpoint,
then computes a deterministic score, grade and top fixes.

Main entry points:
    - resume_grader.main: CLI entrypoint
    - resume_grader.core.runner: evaluate_resume() for a single resume
    - resume_grader.models.config: Config and load_env()
"""
