"""Client for the Stream activity feed API."""
from stream_client.client import (
    StreamClient,
    add_activities,
    add_activity,
    follow,
    get_activities,
)
from stream_client.credentials import (
    BasicAuth,
    FeedId,
    OAuthToken,
    basic_auth,
    feed_id,
    oauth,
)
from stream_client.exceptions import (
    DecodeError,
    RedirectLoopError,
    SigningError,
    StreamClientError,
    TransportError,
    UnsafeRedirectError,
)
from stream_client.signing import sign
from stream_client.transport import CLIENT_VERSION as __version__
from stream_client.transport import StreamTransport
from stream_client.urls import append_qs, make_url

__all__ = [
    "BasicAuth",
    "DecodeError",
    "FeedId",
    "OAuthToken",
    "RedirectLoopError",
    "SigningError",
    "StreamClient",
    "StreamClientError",
    "StreamTransport",
    "TransportError",
    "UnsafeRedirectError",
    "add_activities",
    "add_activity",
    "append_qs",
    "basic_auth",
    "feed_id",
    "follow",
    "get_activities",
    "make_url",
    "oauth",
    "sign",
]
