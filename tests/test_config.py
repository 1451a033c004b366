import pytest
from pydantic import ValidationError

from resume_grader.models.config import Config, load_env
from resume_grader.models.run_params import RunParams


def test_defaults(monkeypatch):
	for var in ("RESUME_GRADER_MODEL", "MAX_RETRIES", "GROUP_TEMPERATURE"):
		monkeypatch.delenv(var, raising=False)
	cfg = Config()
	assert cfg.model == "gpt-4o"
	assert cfg.max_retries == 2
	assert cfg.total_attempts == 3
	assert cfg.group_temperature == 0.0
	assert cfg.overview_temperature == 0.3
	assert cfg.attempt_timeout_seconds == 90
	assert cfg.overview_timeout_seconds == 60


def test_env_aliases(monkeypatch):
	monkeypatch.setenv("RESUME_GRADER_MODEL", "gpt-4o-mini")
	monkeypatch.setenv("MAX_RETRIES", "0")
	cfg = Config()
	assert cfg.model == "gpt-4o-mini"
	assert cfg.total_attempts == 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {
            "MAX_RETRIES": -1
        },
        {
            "RETRY_DELAY_SECONDS": -0.1
        },
        {
            "ATTEMPT_TIMEOUT_SECONDS": 0
        },
        {
            "OVERVIEW_TIMEOUT_SECONDS": -5
        },
        {
            "GROUP_TEMPERATURE": 2.5
        },
        {
            "PROMPT_PRICE_PER_1K": -1
        },
    ],
)
def test_invalid_values_rejected(kwargs):
	with pytest.raises(ValidationError):
		Config(**kwargs)


def test_apply_overrides_only_sets_given_values(tmp_path):
	resume = tmp_path / "cv.txt"
	resume.write_text("hello")
	cfg = Config(RESUME_GRADER_MODEL="gpt-4o", MAX_RETRIES=2)
	cfg.apply_overrides(
	    RunParams(resume_path=resume, max_retries=5, timeout=12.5))
	assert cfg.model == "gpt-4o"
	assert cfg.max_retries == 5
	assert cfg.attempt_timeout_seconds == 12.5


def test_load_env_reads_dotenv(tmp_path, monkeypatch):
	monkeypatch.setenv("RESUME_GRADER_MODEL", "placeholder")
	monkeypatch.delenv("RESUME_GRADER_MODEL")
	env = tmp_path / ".env"
	env.write_text("RESUME_GRADER_MODEL=from-dotenv\n")
	load_env(env)
	assert Config().model == "from-dotenv"


def test_load_env_missing_file_is_noop(tmp_path):
	load_env(tmp_path / "absent.env")
