"""Tests for the word info service and backend factory."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from wordlook.config import Settings
from wordlook.exceptions import (
    ConfigurationError,
    NoResultsError,
    ParseError,
    TransportError,
    UnsupportedOperationError,
    UpstreamError,
)
from wordlook.models import Definition, Example, Relationship, SourceDictionary, Syllable
from wordlook.services.dictionary.base import DictionaryBackend
from wordlook.services.dictionary.free_dictionary import FreeDictionaryBackend
from wordlook.services.dictionary.service import WordInfoService, create_backend
from wordlook.services.dictionary.wordnik import WordnikBackend
from wordlook.services.dictionary.wordsapi import WordsApiBackend


def make_backend(**overrides) -> MagicMock:
    """Backend mock where every lookup succeeds unless overridden."""
    backend = MagicMock(spec=DictionaryBackend)
    backend.name = "Fake"
    backend.definitions = AsyncMock(
        return_value=[Definition(text="a greeting", part_of_speech="exclamation")]
    )
    backend.pronunciations = AsyncMock(return_value=["/həˈloʊ/"])

    async def related_words(word, relationship):
        return ["hi"] if relationship is Relationship.SYNONYM else ["goodbye"]

    backend.related_words = AsyncMock(side_effect=related_words)
    backend.syllables = AsyncMock(return_value=[Syllable("hel"), Syllable("lo")])
    backend.random_word = AsyncMock(return_value="quixotic")
    backend.word_of_the_day = AsyncMock(return_value="serendipity")
    for name, value in overrides.items():
        setattr(backend, name, value)
    return backend


class TestWordInfoServiceFetch:
    """Tests for WordInfoService.fetch."""

    @pytest.mark.asyncio
    async def test_fetch_all_fields(self):
        """Should gather every field into one WordInfo."""
        service = WordInfoService(make_backend())
        info = await service.fetch("hello")

        assert info.word == "hello"
        assert [d.text for d in info.definitions] == ["a greeting"]
        assert info.pronunciations == ["/həˈloʊ/"]
        assert info.synonyms == ["hi"]
        assert info.antonyms == ["goodbye"]
        assert [s.text for s in info.syllables] == ["hel", "lo"]

    @pytest.mark.asyncio
    async def test_queries_each_field_once(self):
        """Should issue one query per field."""
        backend = make_backend()
        await WordInfoService(backend).fetch("hello")

        backend.definitions.assert_awaited_once_with("hello")
        backend.pronunciations.assert_awaited_once_with("hello")
        backend.syllables.assert_awaited_once_with("hello")
        assert backend.related_words.await_count == 2
        relationships = {call.args[1] for call in backend.related_words.await_args_list}
        assert relationships == {Relationship.SYNONYM, Relationship.ANTONYM}

    @pytest.mark.asyncio
    async def test_phonetics_failure_degrades(self):
        """A failed pronunciation query should leave pronunciations empty."""
        backend = make_backend(pronunciations=AsyncMock(side_effect=NoResultsError("no IPA")))
        info = await WordInfoService(backend).fetch("hello")

        assert info.pronunciations == []
        assert len(info.definitions) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            TransportError("down"),
            UpstreamError("HTTP 500", 500),
            ParseError("bad body"),
            UnsupportedOperationError("no syllables"),
        ],
    )
    async def test_optional_failures_degrade(self, error):
        """Every dictionary failure of an optional field should degrade to empty."""
        backend = make_backend(
            related_words=AsyncMock(side_effect=error),
            syllables=AsyncMock(side_effect=error),
        )
        info = await WordInfoService(backend).fetch("hello")

        assert info.synonyms == []
        assert info.antonyms == []
        assert info.syllables == []
        assert info.pronunciations == ["/həˈloʊ/"]

    @pytest.mark.asyncio
    async def test_definitions_failure_propagates(self):
        """A failed definitions query should fail the whole lookup."""
        backend = make_backend(
            definitions=AsyncMock(side_effect=UpstreamError("Fake returned HTTP 404", 404))
        )
        with pytest.raises(UpstreamError) as exc_info:
            await WordInfoService(backend).fetch("qwzxv")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_programming_errors_not_swallowed(self):
        """Non-dictionary errors in optional queries should propagate."""
        backend = make_backend(syllables=AsyncMock(side_effect=KeyError("oops")))
        with pytest.raises(KeyError):
            await WordInfoService(backend).fetch("hello")

    @pytest.mark.asyncio
    async def test_strips_tags_from_text_fields(self):
        """Should strip markup from every text field."""
        backend = make_backend(
            definitions=AsyncMock(
                return_value=[
                    Definition(
                        text="Used to <xref>greet</xref> someone.",
                        part_of_speech="interjection",
                        examples=[Example("<em>Hello</em>, world!"), Example("Hi <b>there</b>")],
                        source_dictionary=SourceDictionary.AHD_5,
                    )
                ]
            ),
            pronunciations=AsyncMock(return_value=["<i>/həˈloʊ/</i>"]),
            related_words=AsyncMock(return_value=["<b>hi</b>"]),
            syllables=AsyncMock(return_value=[Syllable("<s>hel</s>", "stress")]),
        )
        info = await WordInfoService(backend).fetch("hello")

        definition = info.definitions[0]
        assert definition.text == "Used to greet someone."
        assert [e.text for e in definition.examples] == ["Hello, world!", "Hi there"]
        assert definition.top_example == "Hello, world!"
        assert definition.source_dictionary is SourceDictionary.AHD_5
        assert info.pronunciations == ["/həˈloʊ/"]
        assert info.synonyms == ["hi"]
        assert info.syllables == [Syllable("hel", "stress")]

    @pytest.mark.asyncio
    async def test_textless_definitions_kept_in_order(self):
        """Definitions without text should stay in the collection, in source order."""
        backend = make_backend(
            definitions=AsyncMock(
                return_value=[
                    Definition(text="first"),
                    Definition(text=None, part_of_speech="noun"),
                    Definition(text="third"),
                ]
            )
        )
        info = await WordInfoService(backend).fetch("hello")

        assert [d.text for d in info.definitions] == ["first", None, "third"]

    @pytest.mark.asyncio
    async def test_against_wordnik_backend(self, fake_api, wordnik_hello_routes):
        """Should assemble a WordInfo from real backend parsing, missing antonyms included."""
        api = fake_api(wordnik_hello_routes)
        backend = WordnikBackend(api_key="k", transport=api.transport)
        info = await WordInfoService(backend).fetch("hello")

        assert info.definitions[0].text == "Used to greet someone."
        assert info.definitions[0].top_example == "Hello, world!"
        assert info.pronunciations == ["/həˈloʊ/"]
        assert info.synonyms == ["hi", "greeting", "salutation"]
        assert info.antonyms == []
        assert len(api.requests) == 5


class TestWordInfoServiceResolveWord:
    """Tests for WordInfoService.resolve_word."""

    @pytest.mark.asyncio
    async def test_given_word(self):
        """Should return the word as supplied, case untouched."""
        service = WordInfoService(make_backend())
        assert await service.resolve_word("Hello") == "Hello"

    @pytest.mark.asyncio
    async def test_random(self):
        """Should ask the backend for a random word."""
        backend = make_backend()
        assert await WordInfoService(backend).resolve_word(None, random=True) == "quixotic"
        backend.random_word.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_word_of_the_day(self):
        """Should ask the backend for the word of the day."""
        service = WordInfoService(make_backend())
        assert await service.resolve_word(None, word_of_the_day=True) == "serendipity"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("word", [None, "", "   "])
    async def test_missing_word(self, word):
        """Should raise ConfigurationError without a word."""
        with pytest.raises(ConfigurationError):
            await WordInfoService(make_backend()).resolve_word(word)

    @pytest.mark.asyncio
    async def test_random_and_wotd_conflict(self):
        """Should refuse both random and word of the day."""
        with pytest.raises(ConfigurationError):
            await WordInfoService(make_backend()).resolve_word(
                None, random=True, word_of_the_day=True
            )


class TestCreateBackend:
    """Tests for create_backend."""

    def _settings(self, **values) -> Settings:
        return Settings(_env_file=None, **{"wordnik_api_key": "", "wordsapi_key": "", **values})

    def test_wordnik_from_settings(self):
        """Should use the configured Wordnik key."""
        backend = create_backend("wordnik", config=self._settings(wordnik_api_key="env-key"))
        assert isinstance(backend, WordnikBackend)
        assert backend.api_key == "env-key"

    def test_explicit_key_overrides_settings(self):
        """An explicit key should win over the environment."""
        backend = create_backend(
            "wordnik", api_key="cli-key", config=self._settings(wordnik_api_key="env-key")
        )
        assert backend.api_key == "cli-key"

    def test_wordsapi(self):
        """Should build a WordsAPI backend with the configured host."""
        backend = create_backend(
            "wordsapi", config=self._settings(wordsapi_key="k", wordsapi_host="example.test")
        )
        assert isinstance(backend, WordsApiBackend)
        assert backend.host == "example.test"

    def test_free_dictionary_needs_no_key(self):
        """Should build the keyless backend without any key."""
        backend = create_backend("freedictionary", config=self._settings())
        assert isinstance(backend, FreeDictionaryBackend)

    @pytest.mark.parametrize(
        "provider,env_var", [("wordnik", "WORDNIK_API_KEY"), ("wordsapi", "WORDSAPI_KEY")]
    )
    def test_missing_key(self, provider, env_var):
        """Should name the environment variable when no key is available."""
        with pytest.raises(ConfigurationError, match=env_var):
            create_backend(provider, config=self._settings())

    def test_unknown_provider(self):
        """Should reject unknown providers."""
        with pytest.raises(ConfigurationError, match="Unknown dictionary provider"):
            create_backend("oxford", api_key="k", config=self._settings())

    def test_timeout_from_settings(self):
        """Should pass the configured timeout through."""
        backend = create_backend("wordnik", api_key="k", config=self._settings(http_timeout=5.0))
        assert backend.timeout == 5.0
