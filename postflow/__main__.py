"""
CLI entry point for postflow.

Walks a single post through its lifecycle and prints the notice of every
operation.

Each state also logs a ``[<State> State:] Welcome!`` entry notice when the
post installs it. Those are log records at INFO, not printed output, so they
only appear (on stderr) with ``--log-level INFO`` or lower.

Environment Variables:
    POSTFLOW_LOG_LEVEL: Logging level (default: WARNING)
"""

import argparse
import logging
import os
import sys

from .post import Post

DEFAULT_CONTENT = "Hello from published post"
DEFAULT_ADDITION = "\nSome more additions"


def run_demo(content=DEFAULT_CONTENT, addition=DEFAULT_ADDITION):
    """Run the demo scenario and return the outcomes in call order."""
    post = Post()
    return [
        post.add_content(content),
        post.view_content(),
        post.review_content(False),
        post.review_content(True),
        post.add_content(addition),
        post.view_content(),
        post.review_content(True),
        post.add_content(addition),
        post.review_content(False),
        post.view_content(),
    ]


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Walk a post through Draft, InReview and Published",
        prog="python -m postflow"
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default: $POSTFLOW_LOG_LEVEL or WARNING)",
        default=os.environ.get("POSTFLOW_LOG_LEVEL", "WARNING")
    )
    parser.add_argument(
        "--content",
        help="Initial post content",
        default=DEFAULT_CONTENT
    )
    parser.add_argument(
        "--addition",
        help="Content appended after the first failed review",
        default=DEFAULT_ADDITION
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="[%(name)s] %(levelname)s: %(message)s",
    )

    for outcome in run_demo(args.content, args.addition):
        print(outcome.notice)

    return 0


if __name__ == "__main__":
    sys.exit(main())
