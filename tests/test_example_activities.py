"""Tests for the example activities script."""
import os
import sys
from unittest.mock import MagicMock, patch

import pytest

# Add the project root to the Python path so we can import from scripts
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Import after path modification
from scripts.example_activities import main  # noqa: E402
from stream_client.credentials import FeedId  # noqa: E402


@pytest.fixture
def mock_client():
    with patch("scripts.example_activities.StreamClient") as mock_client_class, patch(
        "scripts.example_activities.setup_logging"
    ):
        mock_client_instance = MagicMock()
        mock_client_instance.get_activities.return_value = {"results": []}
        mock_client_instance.add_activity.return_value = {"id": "a1"}
        mock_client_class.return_value = mock_client_instance
        yield mock_client_instance


def test_empty_activity_is_posted(mock_client):
    """Test that --add '{}' posts an empty activity instead of reading."""
    with patch.object(sys, "argv", ["example_activities.py", "user:1", "--add", "{}"]):
        main()

    mock_client.add_activity.assert_called_once_with(FeedId("user", "1"), {})
    mock_client.get_activities.assert_not_called()


def test_read_with_limit(mock_client):
    """Test that the default action reads with the limit option."""
    with patch.object(sys, "argv", ["example_activities.py", "user:1", "--limit", "3"]):
        main()

    mock_client.get_activities.assert_called_once_with(
        FeedId("user", "1"), {"limit": "3"}
    )
    mock_client.add_activity.assert_not_called()
