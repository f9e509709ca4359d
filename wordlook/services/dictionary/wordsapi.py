"""WordsAPI backend, served through RapidAPI with key and host headers."""

from dataclasses import dataclass, field
from typing import Any

import httpx

from wordlook.exceptions import NoResultsError, ParseError
from wordlook.models import NO_PART_OF_SPEECH, Definition, Example, Relationship, Syllable
from wordlook.services.dictionary.base import (
    DictionaryBackend,
    expect_dict,
    expect_list,
    optional_str,
    string_list,
    word_path,
)


@dataclass
class WordsApiResult:
    """One sense from the ``results`` array of /words/{word}."""

    definition: str | None = None
    part_of_speech: str | None = None
    examples: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Any) -> "WordsApiResult":
        data = expect_dict(data, "result")
        return cls(
            definition=optional_str(data, "definition", "result"),
            part_of_speech=optional_str(data, "partOfSpeech", "result"),
            examples=string_list(data, "examples", "result"),
        )

    def to_definition(self) -> Definition:
        return Definition(
            text=self.definition,
            part_of_speech=self.part_of_speech or NO_PART_OF_SPEECH,
            examples=[Example(text) for text in self.examples],
        )


def _pronunciations_from_api(value: Any) -> list[str]:
    """WordsAPI sends either one string or an object keyed by part of speech."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    value = expect_dict(value, "pronunciation")
    ordered = sorted(value.items(), key=lambda item: item[0] != "all")
    transcriptions: list[str] = []
    for _, raw in ordered:
        if not isinstance(raw, str):
            raise ParseError("Expected string transcriptions in pronunciation")
        if raw and raw not in transcriptions:
            transcriptions.append(raw)
    return transcriptions


class WordsApiBackend(DictionaryBackend):
    """Dictionary lookups against WordsAPI."""

    def __init__(
        self,
        api_key: str,
        host: str = "wordsapiv1.p.rapidapi.com",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(f"https://{host}", timeout=timeout, transport=transport)
        self.api_key = api_key
        self.host = host

    @property
    def name(self) -> str:
        return "WordsAPI"

    def _auth_headers(self) -> dict[str, str]:
        return {"X-RapidAPI-Key": self.api_key, "X-RapidAPI-Host": self.host}

    async def definitions(self, word: str) -> list[Definition]:
        data = expect_dict(await self._get_json(f"/words/{word_path(word)}"), "word")
        results = expect_list(data.get("results") or [], "word.results")
        return [WordsApiResult.from_api(item).to_definition() for item in results]

    async def pronunciations(self, word: str) -> list[str]:
        data = expect_dict(
            await self._get_json(f"/words/{word_path(word)}/pronunciation"), "pronunciation"
        )
        # WordsAPI transcriptions are IPA
        transcriptions = _pronunciations_from_api(data.get("pronunciation"))
        if not transcriptions:
            raise NoResultsError(f"No IPA phonetics for '{word}'")
        return transcriptions

    async def related_words(self, word: str, relationship: Relationship) -> list[str]:
        key = f"{relationship.value}s"
        data = expect_dict(await self._get_json(f"/words/{word_path(word)}/{key}"), key)
        return string_list(data, key, key)

    async def syllables(self, word: str) -> list[Syllable]:
        data = expect_dict(await self._get_json(f"/words/{word_path(word)}/syllables"), "syllables")
        syllables = expect_dict(data.get("syllables") or {}, "syllables")
        return [Syllable(text=text) for text in string_list(syllables, "list", "syllables")]

    async def random_word(self) -> str:
        data = expect_dict(await self._get_json("/words/", {"random": "true"}), "word")
        word = optional_str(data, "word", "word")
        if not word:
            raise ParseError("No word in random word response")
        return word
