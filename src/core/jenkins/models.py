# src/core/jenkins/models.py
"""Snapshots of Jenkins API responses.

Each model keeps only the fields the bot displays. Values are fetched
fresh for every command and never cached.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class JobDetails:
    """A Jenkins job as returned by /job/<name>/api/json.

    Attributes:
        display_name: Human-readable job name.
        description: Job description, None when not set.
        url: Absolute job URL.
        last_build_number: Number of the most recent build, None if the
            job has never been built.
    """

    display_name: str
    description: str | None
    url: str
    last_build_number: int | None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "JobDetails":
        last_build = data.get("lastBuild") or {}
        return cls(
            display_name=data.get("displayName") or data.get("name", ""),
            description=data.get("description") or None,
            url=data.get("url", ""),
            last_build_number=last_build.get("number"),
        )


@dataclass(frozen=True)
class BuildDetails:
    """A single build as returned by /job/<name>/<number>/api/json.

    Attributes:
        number: Sequential build number.
        result: SUCCESS, FAILURE, ABORTED, UNSTABLE, ... or None while
            the build is still running.
        duration: Build duration in milliseconds.
        timestamp: Build start time in epoch milliseconds.
        url: Absolute build URL.
    """

    number: int
    result: str | None
    duration: int
    timestamp: int
    url: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "BuildDetails":
        return cls(
            number=int(data["number"]),
            result=data.get("result"),
            duration=int(data.get("duration") or 0),
            timestamp=int(data.get("timestamp") or 0),
            url=data.get("url", ""),
        )


@dataclass(frozen=True)
class UserIdentity:
    """The Jenkins account the bot authenticates as."""

    full_name: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "UserIdentity":
        user = data.get("user") or {}
        return cls(full_name=user.get("fullName") or data.get("fullName", ""))
