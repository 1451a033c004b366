from pathlib import Path

import pytest
from pydantic import ValidationError

from resume_grader.models.run_params import RunParams


def test_run_params_output_format(tmp_path):
	resume = tmp_path / "cv.md"
	resume.write_text("# CV")
	assert RunParams(resume_path=resume).output_format is None
	assert RunParams(resume_path=resume,
	                 output=Path("out/result.JSON")).output_format == "json"
	assert RunParams(resume_path=resume,
	                 output=Path("report.md")).output_format == "markdown"


def test_run_params_missing_file(tmp_path):
	with pytest.raises(ValidationError):
		RunParams(resume_path=tmp_path / "nope.txt")


@pytest.mark.parametrize("field,value", [("max_retries", -1), ("timeout", 0),
                                         ("model", "  ")])
def test_run_params_invalid_overrides(tmp_path, field, value):
	resume = tmp_path / "cv.txt"
	resume.write_text("x")
	with pytest.raises(ValidationError):
		RunParams(resume_path=resume, **{field: value})
