"""Public operations of the Stream activity feed API."""
import json
import logging
from typing import Any, Dict, List, Mapping, Optional

from stream_client.config.stream_config import (
    EnvironmentStreamConfigProvider,
    StreamConfigProvider,
)
from stream_client.credentials import Credentials, FeedId
from stream_client.exceptions import DecodeError
from stream_client.signing import sign
from stream_client.transport import StreamTransport, build_headers
from stream_client.urls import FEED_DETAIL, append_qs, make_url

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY_COPY_LIMIT = 20


def _decode(raw: bytes) -> Any:
    if not raw or not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError as err:
        logger.warning(f"Response body is not valid JSON: {err}")
        raise DecodeError(f"Invalid JSON in response: {err}", body=raw) from err


def _run(
    credentials: Credentials,
    feed: FeedId,
    method: str,
    payload: Any = None,
    options: Optional[Mapping[str, str]] = None,
    transport: Optional[StreamTransport] = None,
) -> Any:
    uri = append_qs(make_url(FEED_DETAIL, credentials, feed), options)
    signature = sign(credentials, feed)
    body = None
    if payload is not None:
        body = json.dumps(payload).encode("utf-8")
    headers = build_headers(signature, json_body=body is not None)

    transport = transport or StreamTransport()
    raw = transport.perform(uri, method, headers, body)
    return _decode(raw)


def get_activities(
    credentials: Credentials,
    feed: FeedId,
    options: Optional[Mapping[str, str]] = None,
    transport: Optional[StreamTransport] = None,
) -> Any:
    """Read the activities of a feed.

    Args:
        credentials: Caller credentials
        feed: Feed to read
        options: Extra query parameters (e.g. limit, offset), sent in order
        transport: Transport to use, a default one if omitted

    Returns:
        Decoded JSON response
    """
    return _run(credentials, feed, "GET", options=options, transport=transport)


def add_activities(
    credentials: Credentials,
    feed: FeedId,
    activities: List[Dict[str, Any]],
    transport: Optional[StreamTransport] = None,
) -> Any:
    """Post a list of activities to a feed and return the decoded response."""
    return _run(credentials, feed, "POST", payload=list(activities), transport=transport)


def add_activity(
    credentials: Credentials,
    feed: FeedId,
    activity: Dict[str, Any],
    transport: Optional[StreamTransport] = None,
) -> Any:
    return add_activities(credentials, feed, [activity], transport=transport)


def follow(
    credentials: Credentials,
    feed: FeedId,
    target: FeedId,
    options: Optional[Mapping[str, Any]] = None,
    transport: Optional[StreamTransport] = None,
) -> Any:
    """Make ``feed`` follow ``target``.

    Args:
        credentials: Caller credentials
        feed: The following feed
        target: The feed to follow
        options: May hold ``activity_copy_limit`` (defaults to 20), sent as given
        transport: Transport to use, a default one if omitted

    Returns:
        Decoded JSON response
    """
    options = options or {}
    payload = {
        "target": str(target),
        "activity_copy_limit": options.get(
            "activity_copy_limit", DEFAULT_ACTIVITY_COPY_LIMIT
        ),
    }
    return _run(credentials, feed, "POST", payload=payload, transport=transport)


class StreamClient:
    """Stream API client bound to one set of credentials."""

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        config_provider: Optional[StreamConfigProvider] = None,
        transport: Optional[StreamTransport] = None,
    ):
        """Initialize the client.

        Args:
            credentials: Explicit credentials. If None, taken from configuration.
            config_provider: Configuration provider. If None, uses environment variables.
            transport: Explicit transport. If None, built from configuration.
        """
        self.credentials = credentials
        self.transport = transport
        if credentials is not None and transport is not None:
            return

        if config_provider is None:
            config_provider = EnvironmentStreamConfigProvider()
        config = config_provider.get_config()

        self.credentials = credentials or config.get_credentials()
        self.transport = transport or StreamTransport(
            timeout=config.timeout, max_redirects=config.max_redirects
        )

    def get_activities(
        self, feed: FeedId, options: Optional[Mapping[str, str]] = None
    ) -> Any:
        return get_activities(self.credentials, feed, options, transport=self.transport)

    def add_activities(self, feed: FeedId, activities: List[Dict[str, Any]]) -> Any:
        return add_activities(
            self.credentials, feed, activities, transport=self.transport
        )

    def add_activity(self, feed: FeedId, activity: Dict[str, Any]) -> Any:
        return add_activity(self.credentials, feed, activity, transport=self.transport)

    def follow(
        self,
        feed: FeedId,
        target: FeedId,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return follow(
            self.credentials, feed, target, options, transport=self.transport
        )
