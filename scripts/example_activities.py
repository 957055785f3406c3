#!/usr/bin/env python3
"""Read, post or follow on a Stream feed using credentials from the environment."""
import argparse
import json
import sys

from stream_client import FeedId, StreamClient, StreamClientError
from stream_client.config import YamlStreamConfigProvider, setup_logging


def parse_feed(value: str) -> FeedId:
    """Parse a ``slug:id`` feed reference."""
    slug, sep, feed_id = value.partition(":")
    if not sep or not slug or not feed_id:
        raise argparse.ArgumentTypeError(f"Expected slug:id, got {value!r}")
    return FeedId(slug, feed_id)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Talk to a Stream activity feed")
    parser.add_argument("feed", type=parse_feed, help="Feed as slug:id, e.g. user:1")
    parser.add_argument(
        "--config",
        type=str,
        help="YAML file with a stream section (default: STREAM_* environment variables)",
    )
    parser.add_argument(
        "--limit", type=str, help="Number of activities to read (query parameter)"
    )
    parser.add_argument(
        "--add",
        type=json.loads,
        metavar="JSON",
        help="Post this activity instead of reading, e.g. '{\"actor\": \"1\", \"verb\": \"tweet\", \"object\": \"1\"}'",
    )
    parser.add_argument(
        "--follow", type=parse_feed, metavar="FEED", help="Follow this feed (slug:id)"
    )
    return parser.parse_args()


def main():
    args = parse_args()
    logger = setup_logging("stream_client")

    config_provider = YamlStreamConfigProvider(args.config) if args.config else None
    try:
        client = StreamClient(config_provider=config_provider)
    except ValueError as e:
        print(f"Configuration error: {str(e)}")
        sys.exit(1)

    try:
        if args.add is not None:
            result = client.add_activity(args.feed, args.add)
        elif args.follow:
            result = client.follow(args.feed, args.follow)
        else:
            options = {"limit": args.limit} if args.limit else None
            result = client.get_activities(args.feed, options)
    except StreamClientError as e:
        logger.error(f"Request for feed {args.feed} failed: {str(e)}")
        sys.exit(1)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
