"""Pytest configuration and fixtures."""

from typing import Any

import httpx
import pytest


class FakeDictionaryApi:
    """Serves canned responses by URL path and records every request."""

    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "Not found"})
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def fake_api():
    """Factory for FakeDictionaryApi instances."""
    return FakeDictionaryApi


@pytest.fixture
def wordnik_hello_routes() -> dict[str, Any]:
    """Wordnik responses for the word 'hello'."""
    base = "/v4/word.json/hello"
    return {
        f"{base}/definitions": [
            {
                "text": "Used to greet <xref>someone</xref>.",
                "partOfSpeech": "interjection",
                "sourceDictionary": "ahd-5",
                "attributionUrl": "https://ahdictionary.com/",
                "exampleUses": [{"text": "Hello, <em>world</em>!"}, {"text": "Hello there."}],
            },
            {
                "text": "A calling of attention.",
                "sourceDictionary": "Century",
            },
            {"partOfSpeech": "noun", "sourceDictionary": "wordnet"},
        ],
        f"{base}/pronunciations": [
            {"raw": "HH AH0 L OW1", "rawType": "arpabet"},
            {"raw": "/həˈloʊ/", "rawType": "IPA"},
        ],
        f"{base}/relatedWords": [
            {"relationshipType": "synonym", "words": ["hi", "greeting", "salutation"]},
        ],
        f"{base}/hyphenation": [
            {"text": "hel", "seq": 0},
            {"text": "lo", "seq": 1, "type": "stress"},
        ],
    }
