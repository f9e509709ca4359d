"""Wordnik v4 backend (api_key passed as a query parameter)."""

from dataclasses import dataclass, field
from typing import Any

import httpx

from wordlook.exceptions import NoResultsError, ParseError
from wordlook.models import (
    NO_PART_OF_SPEECH,
    Definition,
    Example,
    Pronunciation,
    Relationship,
    SourceDictionary,
    Syllable,
)
from wordlook.services.dictionary.base import (
    DictionaryBackend,
    expect_dict,
    expect_list,
    optional_str,
    string_list,
    word_path,
)


@dataclass
class WordnikDefinition:
    """One entry of /word.json/{word}/definitions."""

    text: str | None = None
    part_of_speech: str | None = None
    example_uses: list[str] = field(default_factory=list)
    source_dictionary: str | None = None
    attribution_url: str | None = None

    @classmethod
    def from_api(cls, data: Any) -> "WordnikDefinition":
        data = expect_dict(data, "definition")
        examples: list[str] = []
        for item in expect_list(data.get("exampleUses") or [], "definition.exampleUses"):
            text = optional_str(expect_dict(item, "exampleUse"), "text", "exampleUse")
            if text:
                examples.append(text)
        return cls(
            text=optional_str(data, "text", "definition"),
            part_of_speech=optional_str(data, "partOfSpeech", "definition"),
            example_uses=examples,
            source_dictionary=optional_str(data, "sourceDictionary", "definition"),
            attribution_url=optional_str(data, "attributionUrl", "definition"),
        )

    def to_definition(self) -> Definition:
        return Definition(
            text=self.text,
            part_of_speech=self.part_of_speech or NO_PART_OF_SPEECH,
            examples=[Example(text) for text in self.example_uses],
            source_dictionary=SourceDictionary.parse(self.source_dictionary),
            attribution_url=self.attribution_url,
        )


@dataclass
class WordnikRelated:
    """One entry of /word.json/{word}/relatedWords."""

    relationship_type: str | None
    words: list[str]

    @classmethod
    def from_api(cls, data: Any) -> "WordnikRelated":
        data = expect_dict(data, "relatedWords")
        return cls(
            relationship_type=optional_str(data, "relationshipType", "relatedWords"),
            words=string_list(data, "words", "relatedWords"),
        )


def _pronunciation_from_api(data: Any) -> Pronunciation | None:
    data = expect_dict(data, "pronunciation")
    raw = optional_str(data, "raw", "pronunciation")
    raw_type = optional_str(data, "rawType", "pronunciation")
    if not raw or not raw_type:
        return None
    return Pronunciation(raw=raw, raw_type=raw_type)


def _syllable_from_api(data: Any) -> Syllable | None:
    data = expect_dict(data, "hyphenation")
    text = optional_str(data, "text", "hyphenation")
    if not text:
        return None
    return Syllable(text=text, type=optional_str(data, "type", "hyphenation"))


def _required_word(data: Any, what: str) -> str:
    word = optional_str(expect_dict(data, what), "word", what)
    if not word:
        raise ParseError(f"No word in {what} response")
    return word


class WordnikBackend(DictionaryBackend):
    """Dictionary lookups against api.wordnik.com."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.wordnik.com/v4",
        timeout: float = 30.0,
        related_limit: int = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, timeout=timeout, transport=transport)
        self.api_key = api_key
        self.related_limit = related_limit

    @property
    def name(self) -> str:
        return "Wordnik"

    def _auth_params(self) -> dict[str, str]:
        return {"api_key": self.api_key}

    async def definitions(self, word: str) -> list[Definition]:
        data = await self._get_json(
            f"/word.json/{word_path(word)}/definitions",
            {"limit": 200, "includeRelated": "false", "useCanonical": "false"},
        )
        return [
            WordnikDefinition.from_api(item).to_definition()
            for item in expect_list(data, "definitions")
        ]

    async def pronunciations(self, word: str) -> list[str]:
        data = await self._get_json(f"/word.json/{word_path(word)}/pronunciations")
        parsed = [_pronunciation_from_api(item) for item in expect_list(data, "pronunciations")]
        ipa = [p.raw for p in parsed if p is not None and p.is_ipa]
        if not ipa:
            raise NoResultsError(f"No IPA phonetics for '{word}'")
        return ipa

    async def related_words(self, word: str, relationship: Relationship) -> list[str]:
        data = await self._get_json(
            f"/word.json/{word_path(word)}/relatedWords",
            {
                "relationshipTypes": relationship.value,
                "limitPerRelationshipType": self.related_limit,
            },
        )
        for item in expect_list(data, "relatedWords"):
            related = WordnikRelated.from_api(item)
            if related.relationship_type in (None, relationship.value):
                return related.words
        return []

    async def syllables(self, word: str) -> list[Syllable]:
        data = await self._get_json(f"/word.json/{word_path(word)}/hyphenation")
        parsed = [_syllable_from_api(item) for item in expect_list(data, "hyphenation")]
        return [s for s in parsed if s is not None]

    async def random_word(self) -> str:
        data = await self._get_json("/words.json/randomWord", {"hasDictionaryDef": "true"})
        return _required_word(data, "randomWord")

    async def word_of_the_day(self) -> str:
        data = await self._get_json("/words.json/wordOfTheDay")
        return _required_word(data, "wordOfTheDay")
