"""Base class and response-shape helpers for dictionary backends."""

import logging
from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote

import httpx

from wordlook.exceptions import (
    ParseError,
    TransportError,
    UnsupportedOperationError,
    UpstreamError,
)
from wordlook.models import Definition, Relationship, Syllable

logger = logging.getLogger(__name__)


class DictionaryBackend(ABC):
    """Abstract base class for remote dictionary services.

    Every operation issues exactly one GET request. Transport, HTTP status and
    body parse failures surface as TransportError, UpstreamError and ParseError.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the human-readable name of this service."""
        ...  # pragma: no cover

    @abstractmethod
    async def definitions(self, word: str) -> list[Definition]:
        """Fetch definitions for a word, in the order the service returns them."""
        ...  # pragma: no cover

    @abstractmethod
    async def pronunciations(self, word: str) -> list[str]:
        """
        Fetch IPA transcriptions for a word.

        Raises:
            NoResultsError: The service knows no IPA pronunciation for the word
        """
        ...  # pragma: no cover

    @abstractmethod
    async def related_words(self, word: str, relationship: Relationship) -> list[str]:
        """Fetch synonyms or antonyms; an empty list when the service has none."""
        ...  # pragma: no cover

    async def syllables(self, word: str) -> list[Syllable]:
        """Fetch the syllable breakdown of a word."""
        raise UnsupportedOperationError(f"{self.name} does not provide syllables")

    async def random_word(self) -> str:
        """Ask the service for a random word."""
        raise UnsupportedOperationError(f"{self.name} does not provide random words")

    async def word_of_the_day(self) -> str:
        """Ask the service for today's featured word."""
        raise UnsupportedOperationError(f"{self.name} does not provide a word of the day")

    def _auth_params(self) -> dict[str, str]:
        """Query parameters carrying credentials."""
        return {}

    def _auth_headers(self) -> dict[str, str]:
        """Headers carrying credentials."""
        return {}

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Issue one GET request and decode the JSON body."""
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} ({self.name})")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(
                    url,
                    params={**self._auth_params(), **(params or {})},
                    headers=self._auth_headers(),
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise UpstreamError(f"{self.name} returned HTTP {status} for {path}", status) from e
        except httpx.RequestError as e:
            raise TransportError(f"Could not reach {self.name}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"{self.name} sent a response that is not valid JSON") from e


def word_path(word: str) -> str:
    """Quote a word for use as a single URL path segment."""
    return quote(word, safe="")


def expect_list(data: Any, what: str) -> list[Any]:
    if not isinstance(data, list):
        raise ParseError(f"Expected a list for {what}, got {type(data).__name__}")
    return data


def expect_dict(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ParseError(f"Expected an object for {what}, got {type(data).__name__}")
    return data


def optional_str(data: dict[str, Any], key: str, what: str) -> str | None:
    """Read an optional string field; absent and null both mean None."""
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ParseError(f"Expected a string for {what}.{key}, got {type(value).__name__}")
    return value


def string_list(data: dict[str, Any], key: str, what: str) -> list[str]:
    """Read an optional list of strings; an absent field is an empty list."""
    value = data.get(key)
    if value is None:
        return []
    items = expect_list(value, f"{what}.{key}")
    if not all(isinstance(item, str) for item in items):
        raise ParseError(f"Expected only strings in {what}.{key}")
    return items
