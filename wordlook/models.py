"""Domain records for a dictionary lookup."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

NO_PART_OF_SPEECH = "[None]"


class SourceDictionary(Enum):
    """Dictionary a Wordnik definition was taken from."""

    AHD_5 = "ahd-5"
    CENTURY = "century"
    GCIDE = "gcide"
    WIKTIONARY = "wiktionary"
    WEBSTER = "webster"
    WORDNET = "wordnet"

    @classmethod
    def parse(cls, value: str | None) -> "SourceDictionary | None":
        """Parse a source tag case-insensitively, returning None for unknown tags."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return _SOURCE_DISPLAY_NAMES[self]


_SOURCE_DISPLAY_NAMES = {
    SourceDictionary.AHD_5: "American Heritage Dictionary, 5th Edition",
    SourceDictionary.CENTURY: "The Century Dictionary",
    SourceDictionary.GCIDE: "GNU Collaborative International Dictionary of English",
    SourceDictionary.WIKTIONARY: "Wiktionary",
    SourceDictionary.WEBSTER: "Webster's Revised Unabridged Dictionary",
    SourceDictionary.WORDNET: "WordNet 3.0",
}


class Relationship(str, Enum):
    """Kinds of related words a backend can be asked for."""

    SYNONYM = "synonym"
    ANTONYM = "antonym"


@dataclass
class Example:
    """A usage sentence attached to a definition."""

    text: str


@dataclass
class Definition:
    """One sense of a word."""

    text: str | None = None  # None marks an empty entry, skipped when rendering
    part_of_speech: str = NO_PART_OF_SPEECH
    examples: list[Example] = field(default_factory=list)
    source_dictionary: SourceDictionary | None = None  # Wordnik only
    attribution_url: str | None = None  # Wordnik only

    @property
    def top_example(self) -> str | None:
        """First example in source order, if any."""
        return self.examples[0].text if self.examples else None

    def to_dict(self) -> dict[str, Any]:
        """JSON form, with the camelCase keys Wordnik uses for definitions."""
        return {
            "text": self.text,
            "partOfSpeech": self.part_of_speech,
            "exampleUses": [{"text": example.text} for example in self.examples],
            "sourceDictionary": (
                self.source_dictionary.value if self.source_dictionary else None
            ),
            "attributionUrl": self.attribution_url,
        }


@dataclass
class Pronunciation:
    """A phonetic transcription tagged with its notation (e.g. IPA)."""

    raw: str
    raw_type: str

    @property
    def is_ipa(self) -> bool:
        return self.raw_type.upper() == "IPA"


@dataclass
class Syllable:
    """A syllable fragment, optionally classified (e.g. stress)."""

    text: str
    type: str | None = None


@dataclass(frozen=True)
class WordInfo:
    """Everything fetched for one word; built once per invocation."""

    word: str
    definitions: list[Definition] = field(default_factory=list)
    pronunciations: list[str] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)
    syllables: list[Syllable] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form used for JSON output."""
        return {
            "word": self.word,
            "definitions": [definition.to_dict() for definition in self.definitions],
            "pronunciations": list(self.pronunciations),
            "synonyms": list(self.synonyms),
            "antonyms": list(self.antonyms),
            "syllables": [
                {"text": syllable.text, "type": syllable.type} for syllable in self.syllables
            ],
        }
