"""
Protocol definitions for dependency injection.

Defines Protocol classes for the reasoning-service client and the
text-extraction collaborator to enable testing with mock implementations.
"""

from __future__ import annotations

from typing import Any, Protocol


class ChatCompletionsProtocol(Protocol):
	"""The ``chat.completions`` resource of an OpenAI-compatible client."""

	async def create(self, *, model: str, messages: list[dict[str, str]],
	                 temperature: float, **kwargs: Any) -> Any:
		"""Create a chat completion and return the response object."""
		...


class ChatProtocol(Protocol):
	"""The ``chat`` namespace of an OpenAI-compatible client."""

	@property
	def completions(self) -> ChatCompletionsProtocol:
		...


class ChatClientProtocol(Protocol):
	"""
	Protocol for the reasoning-service client.

	Satisfied by ``openai.AsyncOpenAI`` and by test doubles exposing
	``client.chat.completions.create``.
	"""

	@property
	def chat(self) -> ChatProtocol:
		...


class TextExtractorProtocol(Protocol):
	"""
	Protocol for document text extraction.

	Implementations map document bytes plus a declared format to plain
	text and raise ``UnsupportedFormatError`` or ``ExtractionError``.
	"""

	def extract(self, data: bytes, fmt: str) -> str:
		"""Return the plain text content of a document."""
		...


__all__ = [
    "ChatCompletionsProtocol",
    "ChatProtocol",
    "ChatClientProtocol",
    "TextExtractorProtocol",
]
