"""Tests for URL construction."""
from collections import OrderedDict

import pytest

from stream_client.credentials import basic_auth, feed_id, oauth
from stream_client.exceptions import SigningError
from stream_client.urls import FEED_DETAIL, append_qs, make_url


def test_make_url_feed_detail():
    """Test the feed detail path."""
    uri = make_url(FEED_DETAIL, basic_auth("key", "secret"), feed_id("user", "1"))
    assert uri == "/api/v1.0/feed/user/1/?api_key=key"


def test_make_url_requires_api_key():
    """Test that oauth credentials cannot build a feed url."""
    with pytest.raises(SigningError):
        make_url(FEED_DETAIL, oauth("token"), feed_id("user", "1"))


def test_make_url_unknown_operation():
    """Test that unknown operations are rejected."""
    with pytest.raises(ValueError):
        make_url("feed_list", basic_auth("key", "secret"), feed_id("user", "1"))


def test_append_qs_keeps_insertion_order():
    """Test that parameters follow the mapping order."""
    uri = append_qs("http://test.nl", {"app": "test", "key": "something"})
    assert uri == "http://test.nl?app=test&key=something"

    uri = append_qs("http://test.nl", OrderedDict([("key", "something"), ("app", "test")]))
    assert uri == "http://test.nl?key=something&app=test"


def test_append_qs_extends_existing_query():
    """Test that an existing query string is extended, not replaced."""
    uri = append_qs("/api/v1.0/feed/user/1/?api_key=key", {"limit": "5"})
    assert uri == "/api/v1.0/feed/user/1/?api_key=key&limit=5"


def test_append_qs_without_options():
    """Test that empty options leave the uri untouched."""
    assert append_qs("http://test.nl", {}) == "http://test.nl"
    assert append_qs("http://test.nl") == "http://test.nl"


def test_append_qs_encodes_values():
    """Test that values are form encoded."""
    assert append_qs("http://test.nl", {"q": "a b&c"}) == "http://test.nl?q=a+b%26c"
