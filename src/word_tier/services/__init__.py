"""Clients for the remote frequency and dictionary services."""

from word_tier.services.client import (
    JSONServiceClient,
    ServiceError,
    ServiceResponseError,
    ServiceUnavailable,
)
from word_tier.services.datamuse import DatamuseClient
from word_tier.services.dictionary import DefinitionNotFound, DictionaryClient

__all__ = [
    "JSONServiceClient",
    "ServiceError",
    "ServiceResponseError",
    "ServiceUnavailable",
    "DatamuseClient",
    "DefinitionNotFound",
    "DictionaryClient",
]
