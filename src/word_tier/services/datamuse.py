"""Word frequency lookups against the Datamuse API."""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from word_tier.config import get_settings
from word_tier.services.client import JSONServiceClient
from word_tier.services.models import DATAMUSE_RESPONSE

logger = logging.getLogger(__name__)


class DatamuseClient(JSONServiceClient):
    """Reports corpus frequency (per million words) for a single word."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(
            base_url or get_settings().frequency_api_url,
            timeout=timeout,
            max_retries=max_retries,
            session=session,
        )

    def lookup_frequency(self, word: str) -> Optional[float]:
        """Return the frequency for ``word``, or None if the service has none.

        Only the first frequency tag in response order is read; if it is
        unreadable the frequency is absent.

        Raises:
            ServiceError: If the service is unreachable or answers non-200
        """
        data = self.get_json(params={"sp": word, "md": "f"})

        try:
            candidates = DATAMUSE_RESPONSE.validate_python(data)
        except ValidationError as e:
            logger.warning("Unexpected Datamuse payload for %r: %s", word, e)
            return None

        for candidate in candidates:
            if candidate.frequency_tag is None:
                continue
            frequency = candidate.frequency
            if frequency is None:
                logger.warning(
                    "Unreadable Datamuse frequency tag for %r: %s",
                    word,
                    candidate.frequency_tag,
                )
            else:
                logger.debug("Datamuse frequency for %r: %s", word, frequency)
            return frequency
        return None
