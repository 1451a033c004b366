"""File and resource loading utilities.

This subpackage handles loading the static rubric, prompt templates and
resume text.

Key modules:
    - rubric: Rubric YAML loading and validation
    - prompts: Prompt template loading
    - resume: Plain-text resume extraction
"""

from .prompts import load_prompt
from .rubric import load_rubric, default_rubric, validate_rubric
from .resume import PlainTextExtractor, load_resume_text

__all__ = [
    "load_prompt",
    "load_rubric",
    "default_rubric",
    "validate_rubric",
    "PlainTextExtractor",
    "load_resume_text",
]
