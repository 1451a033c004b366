"""
Reasoning-service client factory module.

Provides factory functions for creating a configured ``AsyncOpenAI``
client from runtime configuration and for releasing it afterwards.
"""

from __future__ import annotations

from typing import Any

from openai import AsyncOpenAI

from resume_grader.errors import ConfigurationError
from resume_grader.models.config import Config
from resume_grader.utils.logging import get_logger

logger = get_logger(__name__)


def create_client(config: Config) -> AsyncOpenAI:
	"""Factory for AsyncOpenAI with configured endpoint and credentials.

	SDK-level retries are disabled; group evaluation applies its own
	bounded retry policy.

	Raises:
		ConfigurationError: If no API key is configured.
	"""
	if not config.api_key:
		raise ConfigurationError(
		    "OPENAI_API_KEY is not set; cannot reach the reasoning service")
	opts: dict[str, Any] = {"api_key": config.api_key, "max_retries": 0}
	if config.base_url:
		opts["base_url"] = config.base_url
	return AsyncOpenAI(**opts)


async def close_client(client: Any) -> None:
	"""Close a client, logging but not raising on failure."""
	close = getattr(client, "close", None)
	if close is None:
		return
	try:
		await close()
	except Exception:
		logger.debug("failed to close reasoning-service client",
		             exc_info=True)


__all__ = ["create_client", "close_client"]
