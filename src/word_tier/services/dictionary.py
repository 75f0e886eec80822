"""Definition lookups against the Free Dictionary API."""

import logging
from typing import Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from word_tier.config import get_settings
from word_tier.services.client import JSONServiceClient, ServiceResponseError
from word_tier.services.models import DICTIONARY_RESPONSE

logger = logging.getLogger(__name__)


class DefinitionNotFound(ServiceResponseError):
    """The dictionary has no entry for the word."""

    pass


class DictionaryClient(JSONServiceClient):
    """Fetches dictionary entries for a single word."""

    response_error = DefinitionNotFound

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(
            base_url or get_settings().definition_api_url,
            timeout=timeout,
            max_retries=max_retries,
            session=session,
        )

    def lookup_definition(self, word: str) -> Optional[str]:
        """Return the first definition of ``word``, or None if none is present.

        Raises:
            DefinitionNotFound: On a non-200 status or a body that is not JSON
            ServiceUnavailable: If the service is unreachable
        """
        data = self.get_json(quote(word, safe=""))

        try:
            entries = DICTIONARY_RESPONSE.validate_python(data)
        except ValidationError as e:
            logger.warning("Unexpected dictionary payload for %r: %s", word, e)
            return None

        for entry in entries:
            definition = entry.first_definition()
            if definition:
                return definition
        return None
