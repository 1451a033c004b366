import pytest

from resume_grader.errors import ErrorCategory, InputValidationError
from resume_grader.models.request import EvaluationRequest


def test_valid_request():
	req = EvaluationRequest.parse({"resumeText": "Jane Doe"})
	assert req.resume_text == "Jane Doe"


@pytest.mark.parametrize(
    "payload",
    [
        None,
        "Jane Doe",
        {},
        {
            "resumeText": ""
        },
        {
            "resumeText": "  \n "
        },
        {
            "resumeText": 42
        },
        {
            "resumeText": ["a"]
        },
    ],
)
def test_invalid_requests(payload):
	with pytest.raises(InputValidationError) as exc_info:
		EvaluationRequest.parse(payload)
	assert exc_info.value.category is ErrorCategory.INPUT
	assert exc_info.value.to_dict()["error"]["category"] == "input"
