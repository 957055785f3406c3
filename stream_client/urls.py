"""REST path construction for the feed API."""
from typing import Mapping, Optional
from urllib import parse

from stream_client.credentials import BasicAuth, Credentials, FeedId
from stream_client.exceptions import SigningError

API_PREFIX = "/api/v1.0"
FEED_DETAIL = "feed_detail"


def make_url(operation: str, credentials: Credentials, feed: FeedId) -> str:
    """Build the request path for ``operation`` on ``feed``.

    Raises:
        SigningError: If the credentials carry no api key
        ValueError: If the operation is unknown
    """
    if operation != FEED_DETAIL:
        raise ValueError(f"Unknown operation: {operation}")
    if not isinstance(credentials, BasicAuth):
        raise SigningError(
            f"{type(credentials).__name__} credentials carry no api key"
        )
    return f"{API_PREFIX}/feed/{feed.slug}/{feed.id}/?api_key={credentials.key}"


def append_qs(uri: str, options: Optional[Mapping[str, str]] = None) -> str:
    """Append ``options`` as query parameters to ``uri``.

    Parameters keep the mapping's iteration order; they are not sorted.
    """
    if not options:
        return uri
    query = parse.urlencode(list(options.items()))
    separator = "&" if "?" in uri else "?"
    return f"{uri}{separator}{query}"
