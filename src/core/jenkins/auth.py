# src/core/jenkins/auth.py
"""HTTP Basic credentials for the Jenkins REST API."""

import base64


def build_basic_auth_header(username: str, token: str) -> dict[str, str]:
    """Build the Authorization header for a Jenkins user and API token.

    Args:
        username: Jenkins username.
        token: Jenkins API token (or password).

    Returns:
        Header dict with a single "Authorization" entry.
    """
    credentials = base64.b64encode(f"{username}:{token}".encode("utf-8")).decode(
        "ascii"
    )
    return {"Authorization": f"Basic {credentials}"}
