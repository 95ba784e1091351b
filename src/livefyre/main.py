"""CLI entry point for the Livefyre client.

Usage:
    python -m src.livefyre.main collection-info --site-id 123 --article-id my-article
    python -m src.livefyre.main comments --site-id 123 --article-id my-article --page 0
    python -m src.livefyre.main post-comment --collection-id 456 --token $LFTOKEN \
        --body "<p>Hello</p>"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from src.common.config import Settings
from src.common.logging import DEFAULT_LOGGER, setup_logging

from .client import LivefyreClient
from .errors import LivefyreError

logger = logging.getLogger(f"{DEFAULT_LOGGER}.cli")

# Subcommand -> (client method, argparse dest -> request config key)
COMMANDS: dict[str, tuple[str, dict[str, str]]] = {
    "create-collection": (
        "create_collection",
        {"site_id": "siteId", "collection_meta": "collectionMeta", "checksum": "checksum"},
    ),
    "collection-info": (
        "get_collection_info_plus",
        {"site_id": "siteId", "article_id": "articleId"},
    ),
    "comments": (
        "get_comments_by_page",
        {"site_id": "siteId", "article_id": "articleId", "page": "pageNumber"},
    ),
    "unfollow": (
        "unfollow_collection",
        {"collection_id": "collectionId", "token": "token"},
    ),
    "post-comment": (
        "post_comment",
        {"collection_id": "collectionId", "token": "token", "body": "commentBody"},
    ),
    "delete-comment": (
        "delete_comment",
        {"collection_id": "collectionId", "token": "token", "comment_id": "commentId"},
    ),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Livefyre StreamHub client")
    parser.add_argument("--config", type=Path, default=None, help="Settings YAML path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("create-collection", help="Create a collection")
    p.add_argument("--site-id", required=True)
    p.add_argument("--collection-meta", required=True, help="Signed collection meta token")
    p.add_argument("--checksum")

    p = sub.add_parser("collection-info", help="Fetch collection info plus head document")
    p.add_argument("--site-id", required=True)
    p.add_argument("--article-id", required=True)

    p = sub.add_parser("comments", help="Fetch a page of comments")
    p.add_argument("--site-id", required=True)
    p.add_argument("--article-id", required=True)
    p.add_argument("--page", type=int, default=0)

    p = sub.add_parser("unfollow", help="Unfollow a collection")
    p.add_argument("--collection-id", required=True)
    p.add_argument("--token", required=True)

    p = sub.add_parser("post-comment", help="Post a comment")
    p.add_argument("--collection-id", required=True)
    p.add_argument("--token", required=True)
    p.add_argument("--body", required=True)

    p = sub.add_parser("delete-comment", help="Delete a comment")
    p.add_argument("--collection-id", required=True)
    p.add_argument("--token", required=True)
    p.add_argument("--comment-id", required=True)

    return parser


def run(args: argparse.Namespace, client: LivefyreClient) -> int:
    """Execute one subcommand and print its result. Returns the exit code."""
    method_name, fields = COMMANDS[args.command]
    request = {
        key: getattr(args, dest)
        for dest, key in fields.items()
        if getattr(args, dest) is not None
    }

    try:
        result = getattr(client, method_name)(request)
    except LivefyreError as e:
        logger.error("%s failed with status %d", args.command, e.status_code)
        print(json.dumps(e.to_dict(), ensure_ascii=False, indent=2), file=sys.stderr)
        return 1

    if result is not None:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        logger.info("%s succeeded", args.command)
    return 0


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else None)

    settings = Settings.load(args.config)
    with LivefyreClient(settings) as client:
        sys.exit(run(args, client))


if __name__ == "__main__":
    main()
