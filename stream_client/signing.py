"""Request signing for simple (api key + secret) authentication.

The signature for a feed is ``"<slug><id> <token>"`` where the token is an
HMAC-SHA1 over ``slug + id`` keyed with the raw SHA1 digest of the API secret,
base64 encoded and made url safe.
"""
import base64
import hashlib
import hmac
import re
from typing import List, Sequence, Tuple

from stream_client.credentials import BasicAuth, Credentials, FeedId
from stream_client.exceptions import SigningError

# Applied in order, each to the output of the previous one.
URL_SAFE_REPLACEMENTS: List[Tuple[str, str]] = [
    (r"/", "_"),
    (r"\+", "-"),
    (r"^=+", ""),
    (r"=+$", ""),
]


def apply_replacements(text: str, replacements: Sequence[Tuple[str, str]]) -> str:
    """Run ``text`` through an ordered list of (pattern, replacement) pairs."""
    for pattern, replacement in replacements:
        text = re.sub(pattern, replacement, text)
    return text


def replace(text: str, patterns: Sequence[str], replacements: Sequence[str]) -> str:
    """Two-list form of :func:`apply_replacements`.

    Raises:
        ValueError: If the number of patterns and replacements differ
    """
    if len(patterns) != len(replacements):
        raise ValueError(
            f"Supply the same amount of replacements as regular expressions "
            f"(got {len(patterns)} patterns and {len(replacements)} replacements)"
        )
    return apply_replacements(text, list(zip(patterns, replacements)))


def sign(credentials: Credentials, feed: FeedId) -> str:
    """Compute the authorization signature for a request on ``feed``.

    Args:
        credentials: Caller credentials, must be basic auth
        feed: Feed the request targets

    Returns:
        Signature string for the ``authorization`` header

    Raises:
        SigningError: If the credentials variant has no signing rule
    """
    if not isinstance(credentials, BasicAuth):
        raise SigningError(
            f"Cannot sign requests with {type(credentials).__name__} credentials"
        )

    digest = hashlib.sha1(credentials.secret.encode("utf-8")).digest()
    data = f"{feed.slug}{feed.id}"
    mac = hmac.new(digest, data.encode("utf-8"), hashlib.sha1).digest()
    token = base64.b64encode(mac).decode("ascii")
    url_safe_token = apply_replacements(token, URL_SAFE_REPLACEMENTS)
    return f"{data} {url_safe_token}"
