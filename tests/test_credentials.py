"""Tests for credential and feed value types."""
import dataclasses

import pytest

from stream_client.credentials import (
    BasicAuth,
    FeedId,
    OAuthToken,
    basic_auth,
    feed_id,
    oauth,
)


def test_constructors():
    """Test the helper constructors."""
    assert basic_auth("key", "secret") == BasicAuth("key", "secret")
    assert oauth("token") == OAuthToken("token")
    assert feed_id("user", "1") == FeedId("user", "1")


def test_values_are_immutable():
    """Test that credentials and feed ids cannot be changed."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        basic_auth("key", "secret").secret = "other"
    with pytest.raises(dataclasses.FrozenInstanceError):
        feed_id("user", "1").slug = "flat"


def test_feed_id_reference():
    """Test the slug:id feed reference."""
    assert str(feed_id("user", "42")) == "user:42"


def test_repr_hides_secrets():
    """Test that secrets do not show up in repr output."""
    assert "'secret'" not in repr(basic_auth("key", "secret"))
    assert "token123" not in repr(oauth("token123"))
