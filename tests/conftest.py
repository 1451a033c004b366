import pytest

from resume_grader.core.partition import partition_rubric
from resume_grader.loaders.rubric import default_rubric
from resume_grader.models.config import Config


@pytest.fixture
def config():
	return Config(OPENAI_API_KEY="sk-test-0000000000", RETRY_DELAY_SECONDS=0)


@pytest.fixture
def rubric():
	return default_rubric()


@pytest.fixture
def groups(rubric):
	return partition_rubric(rubric)
