"""Fixed-width table output for a PR's commits."""

import sys
from typing import Optional, TextIO

from models.data_models import Commit

SHA_WIDTH = 40
DATE_WIDTH = 25
AUTHOR_WIDTH = 20
MESSAGE_RULE_WIDTH = 60


def _row(sha: str, date: str, author: str, message: str) -> str:
    return f"{sha:<{SHA_WIDTH}} | {date:<{DATE_WIDTH}} | {author:<{AUTHOR_WIDTH}} | {message}"


def format_commit_table(pr_number: int, pr_title: str, commits: list[Commit]) -> list[str]:
    """
    Build the lines of a PR's commit table.
    
    Layout: a "PR #<n> - <title>" caption, the column header, a dashed
    separator, one row per commit in the given order, and a trailing blank line.
    Only the first line of each commit message is shown.
    
    Args:
        pr_number: Pull request number
        pr_title: Pull request title
        commits: Commits in display order
        
    Returns:
        list[str]: Output lines without newline characters
    """
    separator = "-+-".join(
        "-" * width for width in (SHA_WIDTH, DATE_WIDTH, AUTHOR_WIDTH, MESSAGE_RULE_WIDTH)
    )
    
    lines = [
        f"PR #{pr_number} - {pr_title}",
        _row("Commit SHA", "Date", "Author", "Message"),
        separator,
    ]
    lines.extend(
        _row(commit.sha, commit.author_date, commit.author_name, commit.summary)
        for commit in commits
    )
    lines.append("")
    return lines


def print_commit_table(
    pr_number: int,
    pr_title: str,
    commits: list[Commit],
    stream: Optional[TextIO] = None,
) -> None:
    """Print a PR's commit table to stream (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    for line in format_commit_table(pr_number, pr_title, commits):
        print(line, file=out)
