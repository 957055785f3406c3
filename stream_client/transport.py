"""HTTPS transport to the Stream API host."""
import logging
from typing import Dict, Mapping, Optional
from urllib import parse

import requests

from stream_client.exceptions import (
    RedirectLoopError,
    TransportError,
    UnsafeRedirectError,
)

logger = logging.getLogger(__name__)

CLIENT_VERSION = "0.1.0"
API_HOST = "api.getstream.io"
BASE_URL = f"https://{API_HOST}"

SUCCESS_STATUSES = (200, 201, 204)
REDIRECT_STATUS = 302


def build_headers(signature: str, json_body: bool = False) -> Dict[str, str]:
    """Headers sent with every request to the API."""
    headers = {
        "X-Stream-Client": f"stream-python-{CLIENT_VERSION}",
        "stream-auth-type": "simple",
        "authorization": signature,
    }
    if json_body:
        headers["Content-Type"] = "application/json"
    return headers


class StreamTransport:
    """Issues single requests against the API host.

    A new session is opened for every call and closed before the call returns,
    whatever the outcome.
    """

    def __init__(self, timeout: float = 10, max_redirects: int = 5):
        """Initialize transport.

        Args:
            timeout: Request timeout in seconds
            max_redirects: Number of 302 redirects followed before giving up
        """
        self.timeout = timeout
        self.max_redirects = max_redirects

    def perform(
        self,
        uri: str,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> bytes:
        """Send one request and return the raw response body.

        Args:
            uri: Path (joined to the API host) or absolute URL
            method: HTTP method
            headers: Request headers
            body: Encoded request body

        Returns:
            Raw response body for 200, 201 and 204 responses

        Raises:
            TransportError: If the API answers with any other status
            RedirectLoopError: If more than ``max_redirects`` redirects occur
            UnsafeRedirectError: If a redirect leaves https://api.getstream.io
            requests.RequestException: On connection failures and timeouts
        """
        url = parse.urljoin(BASE_URL, uri)
        redirects = 0

        with requests.Session() as session:
            while True:
                logger.debug(f"{method} {parse.urlsplit(url).path}")
                try:
                    response = session.request(
                        method,
                        url,
                        headers=dict(headers or {}),
                        data=body,
                        timeout=self.timeout,
                        allow_redirects=False,
                    )
                except requests.RequestException as e:
                    logger.warning(f"Request to {API_HOST} failed: {str(e)}")
                    raise

                if response.status_code in SUCCESS_STATUSES:
                    return response.content

                if response.status_code == REDIRECT_STATUS:
                    location = response.headers.get("Location")
                    if not location:
                        raise TransportError(
                            response.status_code, response.headers, response.content
                        )
                    redirects += 1
                    if redirects > self.max_redirects:
                        logger.warning(f"Too many redirects, last was to {location}")
                        raise RedirectLoopError(self.max_redirects, location)
                    url = parse.urljoin(url, location)
                    target = parse.urlsplit(url)
                    if target.scheme != "https" or target.hostname != API_HOST:
                        logger.warning(f"Refusing redirect off {API_HOST} to {location}")
                        raise UnsafeRedirectError(location)
                    continue

                logger.warning(
                    f"{method} {parse.urlsplit(url).path} returned "
                    f"status {response.status_code}"
                )
                raise TransportError(
                    response.status_code, response.headers, response.content
                )
