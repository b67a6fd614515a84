"""Jenkins integration module.

This module provides:
- JenkinsClient: Async read-only client for the Jenkins REST API
- JobDetails, BuildDetails, UserIdentity: Response snapshots
- Formatting helpers for build result, duration and timestamp
"""

from src.core.jenkins.auth import build_basic_auth_header
from src.core.jenkins.client import (
    JenkinsClient,
    JenkinsError,
    JenkinsHTTPError,
    NotFoundError,
)
from src.core.jenkins.formatting import (
    format_build_duration,
    format_build_result,
    format_build_timestamp,
    format_job_info,
    paginate_console_log,
)
from src.core.jenkins.models import BuildDetails, JobDetails, UserIdentity

__all__ = [
    "build_basic_auth_header",
    "JenkinsClient",
    "JenkinsError",
    "JenkinsHTTPError",
    "NotFoundError",
    "JobDetails",
    "BuildDetails",
    "UserIdentity",
    "format_build_result",
    "format_build_duration",
    "format_build_timestamp",
    "format_job_info",
    "paginate_console_log",
]
