"""
Resume text loading.

Implements the plain-text side of the text-extraction interface. Binary
document formats (PDF, DOCX) are decoded by an external extractor and are
rejected here with ``UnsupportedFormatError``.
"""

from __future__ import annotations

import re
from pathlib import Path

from resume_grader.errors import ExtractionError, UnsupportedFormatError
from resume_grader.utils.protocols import TextExtractorProtocol

PLAIN_TEXT_FORMATS = frozenset({"txt", "text", "md", "markdown"})

_TRAILING_WS_RE = re.compile(r"[ \t]+$", re.M)
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def clean_text(text: str) -> str:
	"""Normalize line endings, trailing whitespace and blank-line runs."""
	text = text.replace("\r\n", "\n").replace("\r", "\n")
	text = _TRAILING_WS_RE.sub("", text)
	return _BLANK_RUN_RE.sub("\n\n", text).strip()


class PlainTextExtractor:
	"""Text extractor for UTF-8 plain text and markdown documents."""

	formats = PLAIN_TEXT_FORMATS

	def extract(self, data: bytes, fmt: str) -> str:
		"""
		Decode a plain-text document.

		Parameters:
			data: Raw document bytes.
			fmt: Declared format, e.g. "txt" or ".md".

		Returns:
			Cleaned resume text.

		Raises:
			UnsupportedFormatError: If the format is not plain text.
			ExtractionError: If the bytes are not UTF-8 or hold no text.
		"""
		normalized = fmt.lower().lstrip(".")
		if normalized not in self.formats:
			raise UnsupportedFormatError(
			    f"Unsupported format '{normalized or '(none)'}'; supported: "
			    f"{', '.join(sorted(self.formats))}")
		try:
			text = data.decode("utf-8-sig")
		except UnicodeDecodeError as exc:
			raise ExtractionError(f"Resume is not valid UTF-8: {exc}") from exc
		cleaned = clean_text(text)
		if not cleaned:
			raise ExtractionError("Resume contains no text")
		return cleaned


def load_resume_text(
    path: str | Path,
    extractor: TextExtractorProtocol | None = None,
) -> str:
	"""
	Read a resume file and return its text.

	The format is taken from the file suffix.

	Parameters:
		path: Resume file path.
		extractor: Extractor to use; defaults to PlainTextExtractor.

	Returns:
		Plain resume text.
	"""
	resume_path = Path(path)
	try:
		data = resume_path.read_bytes()
	except OSError as exc:
		raise ExtractionError(f"Cannot read {resume_path}: {exc}") from exc
	return (extractor or PlainTextExtractor()).extract(data,
	                                                   resume_path.suffix)


__all__ = [
    "PLAIN_TEXT_FORMATS",
    "PlainTextExtractor",
    "clean_text",
    "load_resume_text",
]
