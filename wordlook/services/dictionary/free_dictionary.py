"""dictionaryapi.dev backend; keyless, one entries endpoint for everything."""

from dataclasses import dataclass, field
from typing import Any

import httpx

from wordlook.exceptions import NoResultsError
from wordlook.models import NO_PART_OF_SPEECH, Definition, Example, Relationship
from wordlook.services.dictionary.base import (
    DictionaryBackend,
    expect_dict,
    expect_list,
    optional_str,
    string_list,
    word_path,
)


@dataclass
class FreeDictionarySense:
    definition: str | None = None
    example: str | None = None
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Any) -> "FreeDictionarySense":
        data = expect_dict(data, "definition")
        return cls(
            definition=optional_str(data, "definition", "definition"),
            example=optional_str(data, "example", "definition"),
            synonyms=string_list(data, "synonyms", "definition"),
            antonyms=string_list(data, "antonyms", "definition"),
        )


@dataclass
class FreeDictionaryMeaning:
    part_of_speech: str | None = None
    senses: list[FreeDictionarySense] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Any) -> "FreeDictionaryMeaning":
        data = expect_dict(data, "meaning")
        return cls(
            part_of_speech=optional_str(data, "partOfSpeech", "meaning"),
            senses=[
                FreeDictionarySense.from_api(item)
                for item in expect_list(data.get("definitions") or [], "meaning.definitions")
            ],
            synonyms=string_list(data, "synonyms", "meaning"),
            antonyms=string_list(data, "antonyms", "meaning"),
        )


@dataclass
class FreeDictionaryEntry:
    """One element of the /entries/en/{word} response."""

    word: str | None = None
    phonetic: str | None = None
    phonetics: list[str] = field(default_factory=list)
    meanings: list[FreeDictionaryMeaning] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Any) -> "FreeDictionaryEntry":
        data = expect_dict(data, "entry")
        phonetics: list[str] = []
        for item in expect_list(data.get("phonetics") or [], "entry.phonetics"):
            text = optional_str(expect_dict(item, "phonetic"), "text", "phonetic")
            if text:
                phonetics.append(text)
        return cls(
            word=optional_str(data, "word", "entry"),
            phonetic=optional_str(data, "phonetic", "entry"),
            phonetics=phonetics,
            meanings=[
                FreeDictionaryMeaning.from_api(item)
                for item in expect_list(data.get("meanings") or [], "entry.meanings")
            ],
        )


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


class FreeDictionaryBackend(DictionaryBackend):
    """
    Dictionary lookups against api.dictionaryapi.dev.

    Every operation reads the same /entries document, so a full lookup fetches
    it once per operation (four times). Each call stays a single stateless GET
    with no shared cache between operations.
    """

    def __init__(
        self,
        base_url: str = "https://api.dictionaryapi.dev/api/v2",
        language: str = "en",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, timeout=timeout, transport=transport)
        self.language = language

    @property
    def name(self) -> str:
        return "Free Dictionary"

    async def _entries(self, word: str) -> list[FreeDictionaryEntry]:
        data = await self._get_json(f"/entries/{self.language}/{word_path(word)}")
        return [FreeDictionaryEntry.from_api(item) for item in expect_list(data, "entries")]

    async def definitions(self, word: str) -> list[Definition]:
        definitions = []
        for entry in await self._entries(word):
            for meaning in entry.meanings:
                for sense in meaning.senses:
                    definitions.append(
                        Definition(
                            text=sense.definition,
                            part_of_speech=meaning.part_of_speech or NO_PART_OF_SPEECH,
                            examples=[Example(sense.example)] if sense.example else [],
                        )
                    )
        return definitions

    async def pronunciations(self, word: str) -> list[str]:
        transcriptions = []
        for entry in await self._entries(word):
            if entry.phonetic:
                transcriptions.append(entry.phonetic)
            transcriptions.extend(entry.phonetics)
        # dictionaryapi.dev transcriptions are IPA
        transcriptions = _unique(transcriptions)
        if not transcriptions:
            raise NoResultsError(f"No IPA phonetics for '{word}'")
        return transcriptions

    async def related_words(self, word: str, relationship: Relationship) -> list[str]:
        words = []
        for entry in await self._entries(word):
            for meaning in entry.meanings:
                if relationship is Relationship.SYNONYM:
                    words.extend(meaning.synonyms)
                    for sense in meaning.senses:
                        words.extend(sense.synonyms)
                else:
                    words.extend(meaning.antonyms)
                    for sense in meaning.senses:
                        words.extend(sense.antonyms)
        return _unique(words)
