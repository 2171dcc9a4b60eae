"""GitHub API client for fetching pull request titles and commits.

Each fetch is a single authenticated GET. Failures are not retried: transport
errors, non-2xx statuses and unexpected response shapes all propagate to the
caller.
"""

import logging
from typing import Any

import requests
from pydantic import TypeAdapter, ValidationError

from models.config_models import DEFAULT_API_BASE_URL, DEFAULT_USER_AGENT
from models.data_models import Commit, PullRequestSummary

logger = logging.getLogger(__name__)

_commit_list = TypeAdapter(list[Commit])


class GitHubFetcher:
    """Fetch pull request data from GitHub API."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT
    ):
        """Initialize GitHub API client.

        Args:
            token: GitHub personal access token for authentication
            base_url: API root (default: https://api.github.com)
            user_agent: Client identifier sent as the User-Agent header
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"token {token}",
            "User-Agent": user_agent,
        }

    def _make_github_request(self, url: str) -> Any:
        """Make a GitHub API request and return the decoded JSON body.

        Args:
            url: GitHub API URL to request

        Returns:
            Decoded JSON payload

        Raises:
            requests.RequestException: On transport errors
            requests.HTTPError: On any non-2xx status
            requests.JSONDecodeError: If the body is not valid JSON
        """
        response = requests.get(url, headers=self.headers)

        # Log rate limit info
        remaining = response.headers.get("X-RateLimit-Remaining")
        limit = response.headers.get("X-RateLimit-Limit")
        if remaining and limit:
            logger.debug(f"Rate limit: {remaining}/{limit} remaining")

        # Handle authentication errors
        if response.status_code in (401, 403):
            logger.error(
                f"Authentication error: {response.status_code} - "
                f"{response.text[:200]}"
            )

        response.raise_for_status()

        return response.json()

    def fetch_pr_title(
        self,
        owner: str,
        repo: str,
        pr_number: int
    ) -> str:
        """Fetch the title of a single pull request.

        Args:
            owner: Repository owner (e.g., "facebook")
            repo: Repository name (e.g., "react")
            pr_number: Pull request number

        Returns:
            The PR title

        Raises:
            requests.RequestException: On transport or HTTP errors
            pydantic.ValidationError: If the response has no string title
        """
        url = f"{self.base_url}/repos/{owner}/{repo}/pulls/{pr_number}"

        try:
            payload = self._make_github_request(url)
            pr = PullRequestSummary.model_validate(payload)
        except (requests.RequestException, ValidationError) as e:
            logger.error(f"Error fetching PR #{pr_number} from {owner}/{repo}: {e}")
            raise

        logger.debug(f"Fetched PR #{pr_number}: {pr.title[:50]}")
        return pr.title

    def fetch_pr_commits(
        self,
        owner: str,
        repo: str,
        pr_number: int
    ) -> list[Commit]:
        """Fetch the commits of a pull request.

        Makes one request without pagination, so GitHub's default page size
        applies. Commits are returned in the order the API lists them.

        Args:
            owner: Repository owner (e.g., "facebook")
            repo: Repository name (e.g., "react")
            pr_number: Pull request number

        Returns:
            List of Commit models (empty if the PR has no commits)

        Raises:
            requests.RequestException: On transport or HTTP errors
            pydantic.ValidationError: If the response is not a list of commits
        """
        url = f"{self.base_url}/repos/{owner}/{repo}/pulls/{pr_number}/commits"

        try:
            payload = self._make_github_request(url)
            commits = _commit_list.validate_python(payload)
        except (requests.RequestException, ValidationError) as e:
            logger.error(f"Error fetching commits for PR #{pr_number} from {owner}/{repo}: {e}")
            raise

        logger.info(f"Fetched {len(commits)} commits for PR #{pr_number}")
        return commits
