"""Credential and feed identifier value types."""
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class BasicAuth:
    """API key and secret pair used for simple (signed) authentication."""

    key: str
    secret: str

    def __repr__(self) -> str:
        return f"BasicAuth(key={self.key!r}, secret='***')"


@dataclass(frozen=True)
class OAuthToken:
    """OAuth bearer token. No signing rule exists for this variant yet."""

    token: str

    def __repr__(self) -> str:
        return "OAuthToken(token='***')"


Credentials = Union[BasicAuth, OAuthToken]


@dataclass(frozen=True)
class FeedId:
    """Identifies a feed by its slug and id, e.g. ("user", "123")."""

    slug: str
    id: str

    def __str__(self) -> str:
        return f"{self.slug}:{self.id}"


def basic_auth(key: str, secret: str) -> BasicAuth:
    return BasicAuth(key=key, secret=secret)


def oauth(token: str) -> OAuthToken:
    return OAuthToken(token=token)


def feed_id(slug: str, id: str) -> FeedId:
    return FeedId(slug=slug, id=id)
