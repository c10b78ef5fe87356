from __future__ import annotations

from typing import Any

import requests

from book_word_counter.config import DictionarySettings
from book_word_counter.dictionary import ERROR_PREFIX, DictionaryClient, format_definitions

PAYLOAD = [
    {
        "word": "book",
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {"definition": "A collection of sheets of paper.", "example": "Read a book."},
                    {"definition": "A major division of a long work."},
                ],
            },
            {
                "partOfSpeech": "verb",
                "definitions": [{"definition": "To reserve."}],
            },
        ],
    }
]


class FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def json(self) -> Any:
        return self._payload


class FakeSession:
    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, timeout: float) -> FakeResponse:
        self.calls.append({"url": url, "timeout": timeout})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


def test_lookup_formats_definitions():
    session = FakeSession(FakeResponse(PAYLOAD))
    client = DictionaryClient(DictionarySettings(request_timeout=3.0), session=session)

    text = client.lookup("Book")

    assert text == (
        "noun: A collection of sheets of paper.\n"
        "Example: Read a book.\n"
        "\n"
        "noun: A major division of a long work.\n"
        "\n"
        "verb: To reserve.\n"
        "\n"
    )
    assert session.calls == [
        {"url": "https://api.dictionaryapi.dev/api/v2/entries/en/book", "timeout": 3.0}
    ]


def test_lookup_quotes_apostrophes():
    session = FakeSession(FakeResponse(PAYLOAD))
    DictionaryClient(session=session).lookup("don't")

    assert session.calls[0]["url"].endswith("/don%27t")


def test_lookup_returns_error_text_on_http_error():
    session = FakeSession(FakeResponse({"title": "No Definitions Found"}, status_code=404))

    text = DictionaryClient(session=session).lookup("zzzz")

    assert text.startswith(ERROR_PREFIX)
    assert "404" in text


def test_lookup_returns_error_text_on_network_failure():
    session = FakeSession(error=requests.ConnectionError("offline"))

    text = DictionaryClient(session=session).lookup("book")

    assert text == f"{ERROR_PREFIX}offline"


def test_lookup_returns_error_text_on_unexpected_payload():
    session = FakeSession(FakeResponse({"unexpected": True}))

    text = DictionaryClient(session=session).lookup("book")

    assert text.startswith(ERROR_PREFIX)


def test_format_definitions_without_definitions():
    assert format_definitions([{"meanings": []}]) == ""


def test_lookup_returns_error_text_when_meaning_is_not_an_object():
    session = FakeSession(FakeResponse([{"meanings": ["oops"]}]))

    text = DictionaryClient(session=session).lookup("book")

    assert text.startswith(ERROR_PREFIX)


def test_lookup_returns_error_text_when_definitions_are_null():
    payload = [{"meanings": [{"partOfSpeech": "noun", "definitions": None}]}]
    session = FakeSession(FakeResponse(payload))

    text = DictionaryClient(session=session).lookup("book")

    assert text.startswith(ERROR_PREFIX)


def test_lookup_returns_error_text_when_definition_is_not_an_object():
    payload = [{"meanings": [{"partOfSpeech": "noun", "definitions": ["plain"]}]}]
    session = FakeSession(FakeResponse(payload))

    text = DictionaryClient(session=session).lookup("book")

    assert text.startswith(ERROR_PREFIX)
