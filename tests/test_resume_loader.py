import pytest

from resume_grader.errors import ExtractionError, UnsupportedFormatError
from resume_grader.loaders.resume import (
    PlainTextExtractor,
    clean_text,
    load_resume_text,
)


def test_load_markdown_resume(tmp_path):
	path = tmp_path / "cv.md"
	path.write_text("# Jane Doe   \n\n\n\n\nEngineer\n", encoding="utf-8")
	assert load_resume_text(path) == "# Jane Doe\n\nEngineer"


def test_bom_is_removed():
	text = PlainTextExtractor().extract("\ufeffJane".encode("utf-8"), "txt")
	assert text == "Jane"


def test_unsupported_format(tmp_path):
	path = tmp_path / "cv.pdf"
	path.write_bytes(b"%PDF-1.7")
	with pytest.raises(UnsupportedFormatError, match="pdf"):
		load_resume_text(path)


def test_non_utf8_rejected():
	with pytest.raises(ExtractionError):
		PlainTextExtractor().extract(b"\xff\xfe\xfa", ".txt")


def test_empty_document_rejected():
	with pytest.raises(ExtractionError):
		PlainTextExtractor().extract(b"  \n\t ", "text")


def test_unreadable_file(tmp_path):
	with pytest.raises(ExtractionError):
		load_resume_text(tmp_path / "missing.txt")


def test_custom_extractor_is_used(tmp_path):
	path = tmp_path / "cv.docx"
	path.write_bytes(b"binary")

	class DummyExtractor:

		def __init__(self):
			self.seen = None

		def extract(self, data, fmt):
			self.seen = (data, fmt)
			return "extracted"

	extractor = DummyExtractor()
	assert load_resume_text(path, extractor) == "extracted"
	assert extractor.seen == (b"binary", ".docx")


def test_clean_text_normalizes_newlines():
	assert clean_text("a\r\nb\rc") == "a\nb\nc"
