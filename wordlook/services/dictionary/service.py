"""Word info service: one definitions lookup plus best-effort extras."""

import asyncio
import logging
from collections.abc import Awaitable

import httpx

from wordlook.config import API_KEY_ENV_VARS, Settings, settings
from wordlook.exceptions import ConfigurationError, DictionaryError
from wordlook.models import Definition, Example, Relationship, Syllable, WordInfo
from wordlook.services.dictionary.base import DictionaryBackend
from wordlook.services.dictionary.free_dictionary import FreeDictionaryBackend
from wordlook.services.dictionary.wordnik import WordnikBackend
from wordlook.services.dictionary.wordsapi import WordsApiBackend
from wordlook.services.text import strip_tags

logger = logging.getLogger(__name__)

PROVIDERS = ("wordnik", "wordsapi", "freedictionary")


def create_backend(
    provider: str,
    api_key: str | None = None,
    config: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> DictionaryBackend:
    """
    Build the backend for a provider.

    Args:
        provider: One of PROVIDERS
        api_key: Explicit key, overriding the one from the environment
        config: Settings to read keys and endpoints from. Defaults to the global settings
        transport: Optional httpx transport (tests)

    Raises:
        ConfigurationError: Unknown provider, or no key for a keyed provider
    """
    config = config or settings
    if provider not in PROVIDERS:
        raise ConfigurationError(
            f"Unknown dictionary provider '{provider}' (choose from {', '.join(PROVIDERS)})"
        )

    if provider == "freedictionary":
        return FreeDictionaryBackend(
            base_url=config.free_dictionary_base_url,
            timeout=config.http_timeout,
            transport=transport,
        )

    key = api_key or config.api_key_for(provider)
    if not key:
        raise ConfigurationError(
            f"No API key found: pass --use-key or set {API_KEY_ENV_VARS[provider]}"
        )

    if provider == "wordsapi":
        return WordsApiBackend(
            api_key=key,
            host=config.wordsapi_host,
            timeout=config.http_timeout,
            transport=transport,
        )
    return WordnikBackend(
        api_key=key,
        base_url=config.wordnik_base_url,
        timeout=config.http_timeout,
        related_limit=config.related_words_limit,
        transport=transport,
    )


def _clean_definition(definition: Definition) -> Definition:
    return Definition(
        text=strip_tags(definition.text) if definition.text is not None else None,
        part_of_speech=strip_tags(definition.part_of_speech),
        examples=[Example(strip_tags(example.text)) for example in definition.examples],
        source_dictionary=definition.source_dictionary,
        attribution_url=definition.attribution_url,
    )


class WordInfoService:
    """
    Aggregates everything known about a word from one backend.

    Definitions are mandatory: their failure fails the lookup. Pronunciations,
    synonyms, antonyms and syllables are best-effort and fall back to empty
    lists. Definitions without text are kept; the presenter skips them.
    """

    def __init__(self, backend: DictionaryBackend) -> None:
        self.backend = backend

    async def resolve_word(
        self,
        word: str | None = None,
        random: bool = False,
        word_of_the_day: bool = False,
    ) -> str:
        """Return the word to look up, asking the service when random or WOTD is requested."""
        if random and word_of_the_day:
            raise ConfigurationError(
                "Ask for either a random word or the word of the day, not both"
            )
        if random:
            return await self.backend.random_word()
        if word_of_the_day:
            return await self.backend.word_of_the_day()
        if not word or not word.strip():
            raise ConfigurationError("No word given: pass a word, --random or --wotd")
        return word

    async def fetch(self, word: str) -> WordInfo:
        """
        Fetch definitions and extras for a word concurrently.

        Raises:
            DictionaryError: The definitions lookup failed
        """
        definitions, pronunciations, synonyms, antonyms, syllables = await asyncio.gather(
            self.backend.definitions(word),
            self._optional(self.backend.pronunciations(word), "pronunciations", word),
            self._optional(
                self.backend.related_words(word, Relationship.SYNONYM), "synonyms", word
            ),
            self._optional(
                self.backend.related_words(word, Relationship.ANTONYM), "antonyms", word
            ),
            self._optional(self.backend.syllables(word), "syllables", word),
            return_exceptions=True,
        )
        # Every request has settled; surface the first failure in argument order
        for result in (definitions, pronunciations, synonyms, antonyms, syllables):
            if isinstance(result, BaseException):
                raise result

        logger.debug(
            f"Fetched '{word}' from {self.backend.name}: {len(definitions)} definitions, "
            f"{len(pronunciations)} pronunciations, {len(synonyms)} synonyms, "
            f"{len(antonyms)} antonyms, {len(syllables)} syllables"
        )

        return WordInfo(
            word=word,
            definitions=[_clean_definition(d) for d in definitions],
            pronunciations=[strip_tags(p) for p in pronunciations],
            synonyms=[strip_tags(s) for s in synonyms],
            antonyms=[strip_tags(a) for a in antonyms],
            syllables=[Syllable(text=strip_tags(s.text), type=s.type) for s in syllables],
        )

    async def _optional(self, lookup: Awaitable[list], what: str, word: str) -> list:
        """Await a best-effort lookup, degrading dictionary failures to an empty list."""
        try:
            return await lookup
        except DictionaryError as e:
            logger.debug(f"No {what} for '{word}' from {self.backend.name}: {e}")
            return []
