"""Shared JSON-over-HTTP client for the remote word services."""

import logging
from typing import Any, Optional

import requests
from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from word_tier.config import get_settings

logger = logging.getLogger(__name__)

# Transport failures worth another attempt; HTTP statuses are never retried
TRANSIENT_ERRORS = (requests.ConnectionError, requests.Timeout)


class ServiceError(Exception):
    """Error communicating with a word service."""

    pass


class ServiceUnavailable(ServiceError):
    """The service could not be reached."""

    pass


class ServiceResponseError(ServiceError):
    """The service answered with a non-success status or an unreadable body."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class JSONServiceClient:
    """Issues GET requests and decodes JSON bodies with retry on transport errors."""

    # Exception raised for non-success statuses; subclasses may narrow it
    response_error: type[ServiceResponseError] = ServiceResponseError

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Service endpoint without trailing slash
            timeout: Per-request timeout in seconds
            max_retries: Total attempts for transient transport failures
            session: Optional preconfigured requests session
        """
        settings = get_settings()
        self.base_url = base_url.rstrip("/")
        self.timeout = settings.request_timeout if timeout is None else timeout
        self.max_retries = settings.max_retries if max_retries is None else max_retries
        self.session = session or requests.Session()

    def _send(self, url: str, params: Optional[dict[str, str]]) -> requests.Response:
        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=0.5, max=4),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            reraise=False,
        )
        try:
            for attempt in retrying:
                with attempt:
                    return self.session.get(url, params=params, timeout=self.timeout)
        except RetryError as e:
            cause = e.last_attempt.exception()
            raise ServiceUnavailable(f"{url} unreachable: {cause}") from cause
        except requests.RequestException as e:
            raise ServiceUnavailable(f"{url} request failed: {e}") from e
        raise ServiceUnavailable(f"{url} gave no response")  # pragma: no cover

    def get_json(self, path: str = "", params: Optional[dict[str, str]] = None) -> Any:
        """GET ``base_url/path`` and return the decoded JSON body.

        Raises:
            ServiceUnavailable: If the request never completed
            ServiceResponseError: On a non-200 status or a body that is not JSON
        """
        url = f"{self.base_url}/{path}" if path else self.base_url
        response = self._send(url, params)

        if response.status_code != 200:
            logger.warning("%s returned HTTP %s", url, response.status_code)
            raise self.response_error(
                f"{url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise self.response_error(
                f"{url} returned a body that is not JSON",
                status_code=response.status_code,
            ) from e
