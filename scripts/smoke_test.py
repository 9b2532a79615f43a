"""Exercise every endpoint of a running server and stop at the first failure."""

from __future__ import annotations

import argparse
import sys
import uuid

import httpx


class SmokeTestFailure(Exception):
    """Raised when an endpoint answers with an unexpected status."""


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(description="Smoke-test the user API.")
    parser.add_argument(
        "--base-url",
        type=str,
        default="http://localhost:8080",
        help="API base URL (default: http://localhost:8080).",
    )
    return parser.parse_args(argv)


def check(label: str, response: httpx.Response, expected: int) -> httpx.Response:
    """Print the outcome of one call and fail on an unexpected status."""
    if response.status_code != expected:
        raise SmokeTestFailure(
            f"{label} failed (HTTP {response.status_code}, expected {expected}): {response.text}"
        )
    print(f"ok   {label}: {response.text}")
    return response


def run(client: httpx.Client) -> None:
    """Run the endpoint checks in order."""
    check("ping", client.get("/ping"), 200)
    check("list users", client.get("/users"), 200)

    email = f"smoke-{uuid.uuid4().hex[:12]}@example.com"
    created = check(
        "create user",
        client.post(
            "/user",
            json={
                "name": "Test User",
                "email": email,
                "img_url": "https://example.com/avatar.jpg",
            },
        ),
        201,
    ).json()
    check("get user by id", client.get(f"/user/{created['user_id']}"), 200)

    check("non-numeric id", client.get("/user/abc"), 400)
    check("unknown id", client.get("/user/999999"), 404)
    check(
        "truncated JSON",
        client.post(
            "/user",
            content='{"name": "Invalid JSON"',
            headers={"Content-Type": "application/json"},
        ),
        400,
    )
    check("list users again", client.get("/users"), 200)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = parse_args(argv)
    with httpx.Client(base_url=args.base_url, timeout=10.0) as client:
        try:
            run(client)
        except (SmokeTestFailure, httpx.HTTPError) as exc:
            print(f"FAIL {exc}", file=sys.stderr)
            sys.exit(1)
    print("All checks passed")


if __name__ == "__main__":
    main()
