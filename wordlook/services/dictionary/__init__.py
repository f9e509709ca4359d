"""Dictionary backends and the word info service built on them."""

from wordlook.services.dictionary.base import DictionaryBackend
from wordlook.services.dictionary.free_dictionary import FreeDictionaryBackend
from wordlook.services.dictionary.service import PROVIDERS, WordInfoService, create_backend
from wordlook.services.dictionary.wordnik import WordnikBackend
from wordlook.services.dictionary.wordsapi import WordsApiBackend

__all__ = [
    "DictionaryBackend",
    "FreeDictionaryBackend",
    "PROVIDERS",
    "WordInfoService",
    "WordnikBackend",
    "WordsApiBackend",
    "create_backend",
]
