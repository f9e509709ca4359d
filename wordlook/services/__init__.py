"""Services for dictionary lookups."""

from wordlook.services.dictionary import WordInfoService, create_backend
from wordlook.services.text import strip_tags

__all__ = ["WordInfoService", "create_backend", "strip_tags"]
