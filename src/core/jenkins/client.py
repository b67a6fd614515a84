# src/core/jenkins/client.py
"""Async Jenkins REST API client.

Wraps the four read-only endpoints the bot needs:
- /job/<name>/api/json            job details
- /job/<name>/<number>/api/json   build details
- /job/<name>/<number>/consoleText console log
- /me/api/json                    authenticated user

Requests are plain authenticated GETs with no retries.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from src.config import Settings
from src.core.jenkins.auth import build_basic_auth_header
from src.core.jenkins.models import BuildDetails, JobDetails, UserIdentity

logger = logging.getLogger(__name__)


class JenkinsError(Exception):
    """Base error for failed Jenkins requests."""


class NotFoundError(JenkinsError):
    """Jenkins did not return the resource (any non-2xx answer).

    Attributes:
        status_code: HTTP status of the response.
    """

    def __init__(self, message: str, status_code: int = 404) -> None:
        super().__init__(message)
        self.status_code = status_code


class JenkinsHTTPError(NotFoundError):
    """Non-2xx answer other than 404, e.g. 401, 403 or 500."""


def job_path(job_name: str) -> str:
    """Convert a job name into its URL path.

    Folder jobs use "/" as separator: "team/deploy" -> "job/team/job/deploy".

    Args:
        job_name: Job name, optionally with folder segments.

    Returns:
        URL path without leading slash.
    """
    segments = [s for s in job_name.strip().split("/") if s]
    if not segments:
        raise ValueError("Job name must not be empty")
    return "/".join(f"job/{quote(s, safe='')}" for s in segments)


class JenkinsClient:
    """Read-only client for a single Jenkins server."""

    def __init__(
        self,
        base_url: str,
        username: str,
        token: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Jenkins root URL, e.g. https://ci.example.com.
            username: Jenkins username.
            token: Jenkins API token.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = base_url.rstrip("/")
        self._headers = build_basic_auth_header(username, token)
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "JenkinsClient":
        return cls(
            base_url=settings.jenkins_url,
            username=settings.jenkins_user,
            token=settings.jenkins_token,
            timeout=settings.jenkins_timeout,
        )

    async def _get(self, path: str) -> httpx.Response:
        url = f"{self.base_url}/{path}"
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            response = await client.get(url, headers=self._headers)

        logger.debug("GET %s -> %s", url, response.status_code)
        if response.status_code == 404:
            raise NotFoundError(f"Jenkins returned 404 Not Found for /{path}")
        if not response.is_success:
            raise JenkinsHTTPError(
                f"Jenkins returned {response.status_code} "
                f"{response.reason_phrase} for /{path}",
                status_code=response.status_code,
            )
        return response

    async def _get_json(self, path: str) -> dict[str, Any]:
        response = await self._get(path)
        return response.json()

    async def fetch_job(self, job_name: str) -> JobDetails:
        """Fetch job details.

        Raises:
            NotFoundError: On any non-2xx response (404 for an unknown job).
            JenkinsHTTPError: Subclass raised for non-2xx statuses other than 404.
        """
        data = await self._get_json(f"{job_path(job_name)}/api/json")
        return JobDetails.from_json(data)

    async def fetch_build(self, job_name: str, build_number: int) -> BuildDetails:
        """Fetch details of one build of a job."""
        data = await self._get_json(f"{job_path(job_name)}/{build_number}/api/json")
        return BuildDetails.from_json(data)

    async def fetch_console_log(self, job_name: str, build_number: int) -> str:
        """Fetch the plain-text console output of a build."""
        response = await self._get(f"{job_path(job_name)}/{build_number}/consoleText")
        return response.text

    async def fetch_current_user(self) -> UserIdentity:
        """Fetch the Jenkins account the configured credentials belong to."""
        data = await self._get_json("me/api/json")
        return UserIdentity.from_json(data)

    async def fetch_last_build(self, job_name: str) -> tuple[JobDetails, BuildDetails]:
        """Fetch a job together with its most recent build.

        Returns:
            Tuple of (JobDetails, BuildDetails).

        Raises:
            JenkinsError: If the job has never been built.
        """
        job = await self.fetch_job(job_name)
        if job.last_build_number is None:
            raise JenkinsError(f"Job '{job_name}' has no builds yet")
        build = await self.fetch_build(job_name, job.last_build_number)
        return job, build
