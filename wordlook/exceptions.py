"""Error taxonomy for dictionary lookups."""


class WordlookError(Exception):
    """Base class for every error surfaced to the user."""


class ConfigurationError(WordlookError):
    """Missing API key, missing word or an unusable combination of options."""


class DictionaryError(WordlookError):
    """A dictionary service request failed."""


class TransportError(DictionaryError):
    """The dictionary service could not be reached (network, DNS, TLS, timeout)."""


class UpstreamError(DictionaryError):
    """The dictionary service answered with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(DictionaryError):
    """The response body did not match the expected JSON shape."""


class NoResultsError(DictionaryError):
    """The query succeeded but yielded nothing usable (e.g. no IPA phonetics)."""


class UnsupportedOperationError(DictionaryError):
    """The selected provider has no endpoint for this operation."""
