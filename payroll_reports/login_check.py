"""
Manual smoke check for the backend login endpoint.

Posts one set of credentials to /api/auth/login and prints what comes back.
No retries and no state; meant to be run by hand against a dev server.
"""
import argparse
import json
import logging
import os
import sys
import urllib.error
import urllib.request
from typing import Any, Dict, Optional, Sequence

from .config import DEFAULT_API_BASE_URL, ENV_API_BASE_URL, ENV_LOGIN_PASSWORD, LOGIN_ENDPOINT
from .errors import LoginCheckError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def _decode(raw: bytes) -> Dict[str, Any]:
    try:
        body = json.loads(raw.decode("utf-8") or "{}")
    except (UnicodeDecodeError, json.JSONDecodeError):
        return {}
    return body if isinstance(body, dict) else {}


def check_login(base_url: str, email: str, password: str, timeout: int = 15) -> Dict[str, Any]:
    """Return the decoded login response (``token`` and ``user`` on success)."""
    target = base_url.rstrip("/") + LOGIN_ENDPOINT
    payload = json.dumps({"email": email, "password": password}).encode("utf-8")
    req = urllib.request.Request(
        target,
        data=payload,
        method="POST",
        headers={"Content-Type": "application/json", "Accept": "application/json"},
    )
    logger.info("Making request to %s", target)
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return _decode(resp.read())
    except urllib.error.HTTPError as exc:
        body = _decode(exc.read())
        raise LoginCheckError(body.get("message") or str(exc), status=exc.code, body=body) from exc
    except urllib.error.URLError as exc:
        raise LoginCheckError(str(exc.reason)) from exc


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Try one login against the WorkPulse backend.")
    parser.add_argument("email")
    parser.add_argument("--password", default=None, help=f"defaults to ${ENV_LOGIN_PASSWORD}")
    parser.add_argument("--url", default=os.getenv(ENV_API_BASE_URL, DEFAULT_API_BASE_URL))
    parser.add_argument("--timeout", type=int, default=15)
    args = parser.parse_args(argv)

    setup_logging()
    password = args.password if args.password is not None else os.getenv(ENV_LOGIN_PASSWORD, "")
    print(f"Testing login with: {args.email}")
    try:
        data = check_login(args.url, args.email, password, timeout=args.timeout)
    except LoginCheckError as exc:
        print("Login failed:", file=sys.stderr)
        print(f"Error message: {exc.message}", file=sys.stderr)
        if exc.body:
            print(f"Full error: {exc.body}", file=sys.stderr)
        return 1

    print("Login successful!")
    print("Token:", data.get("token"))
    print("User:", data.get("user"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
