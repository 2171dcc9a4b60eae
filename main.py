#!/usr/bin/env python3
"""
PR Commit Table - Main CLI entrypoint

Fetches the title and commit list of one or more GitHub pull requests and
prints each as an aligned text table.

Usage:
    python main.py --owner facebook --repo react --token-path ~/.github_token --prs 42
    python main.py -o facebook -r react -t ~/.github_token -p 42 43 44
"""

import argparse
import sys
from typing import Iterable, Optional, TextIO

import requests
from pydantic import ValidationError

from fetchers.github import GitHubFetcher
from models.config_models import AppConfig
from utils.config_loader import load_config, load_token
from utils.logger import setup_logger
from utils.table import print_commit_table

__version__ = "0.1.0"

logger = setup_logger()


def print_pr_commit_tables(
    owner: str,
    repo: str,
    pr_numbers: Iterable[int],
    fetcher: GitHubFetcher,
    stream: Optional[TextIO] = None
) -> None:
    """
    Fetch and print the commit table of each PR, in the order given.

    PRs are processed one at a time. The first failure propagates and no
    later PR is fetched; nothing is printed for the PR that failed.

    Args:
        owner: Repository owner (e.g., "facebook")
        repo: Repository name (e.g., "react")
        pr_numbers: Pull request numbers to show
        fetcher: GitHubFetcher used for both requests
        stream: Output stream (default: stdout)
    """
    for pr_number in pr_numbers:
        logger.debug(f"Processing PR #{pr_number} in {owner}/{repo}")
        pr_title = fetcher.fetch_pr_title(owner, repo, pr_number)
        commits = fetcher.fetch_pr_commits(owner, repo, pr_number)
        print_commit_table(pr_number, pr_title, commits, stream=stream)


def positive_int(value: str) -> int:
    """argparse type for PR numbers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid PR number: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"PR number must be positive: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Show the commits of GitHub pull requests as a table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One PR
  python main.py -o facebook -r react -t ~/.github_token -p 42

  # Several PRs, printed in the order given
  python main.py -o facebook -r react -t ~/.github_token -p 42 43 44
        """
    )
    parser.add_argument(
        "-o", "--owner",
        required=True,
        help="GitHub repository owner (e.g., 'facebook')"
    )
    parser.add_argument(
        "-r", "--repo",
        required=True,
        help="GitHub repository name (e.g., 'react')"
    )
    parser.add_argument(
        "-t", "--token-path",
        required=True,
        help="Path to the file containing your GitHub token"
    )
    parser.add_argument(
        "-p", "--prs",
        required=True,
        nargs="+",
        type=positive_int,
        metavar="PR",
        help="Pull request numbers to fetch"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL from .env, else INFO)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[list[str]] = None):
    """Main CLI entrypoint."""
    args = build_parser().parse_args(argv)

    config = load_config()
    if args.log_level:
        try:
            config = AppConfig.model_validate({**config.model_dump(), "log_level": args.log_level})
        except ValidationError as e:
            logger.error(f"Invalid --log-level: {args.log_level} ({e.errors()[0]['msg']})")
            sys.exit(1)
    setup_logger(config.log_level)

    try:
        token = load_token(args.token_path)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read token: {e}")
        sys.exit(1)

    fetcher = GitHubFetcher(
        token,
        base_url=config.api_base_url,
        user_agent=config.user_agent
    )

    try:
        print_pr_commit_tables(args.owner, args.repo, args.prs, fetcher)
    except requests.HTTPError as e:
        logger.error(f"GitHub API request failed: {e}")
        sys.exit(1)
    except (requests.JSONDecodeError, ValidationError) as e:
        logger.error(f"Unexpected response from GitHub API: {e}")
        sys.exit(1)
    except requests.RequestException as e:
        logger.error(f"Network error: {e}")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
