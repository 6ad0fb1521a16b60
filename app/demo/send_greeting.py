"""Send a sample greeting request to a running greeting service."""

from __future__ import annotations

import argparse
from typing import Any

import requests

DEFAULT_BASE_URL = "http://localhost:5000"
DEFAULT_TIMEOUT_SECONDS = 10.0


def build_payload(
    addressee: str | None,
    tone: str | None,
    *,
    capitalized_keys: bool = False,
) -> dict[str, Any]:
    """Build the request body, leaving out fields that were not given."""
    fields = {"addressee": addressee, "tone": tone}
    return {
        (name.capitalize() if capitalized_keys else name): value
        for name, value in fields.items()
        if value is not None
    }


def send_greeting(
    base_url: str,
    *,
    addressee: str | None,
    tone: str | None,
    capitalized_keys: bool = False,
    session: requests.Session | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> tuple[int, str]:
    """POST a greeting request and return the status code and response text.

    A session created here is closed before returning; an injected one is
    left open for the caller.
    """
    normalized = base_url.rstrip("/")
    if not normalized:
        raise ValueError("base_url is required")

    payload = build_payload(addressee, tone, capitalized_keys=capitalized_keys)
    if session is not None:
        return _post(session, f"{normalized}/", payload, timeout_seconds)

    with requests.Session() as owned_session:
        return _post(owned_session, f"{normalized}/", payload, timeout_seconds)


def _post(
    session: requests.Session,
    url: str,
    payload: dict[str, Any],
    timeout_seconds: float,
) -> tuple[int, str]:
    response = session.post(url, json=payload, timeout=timeout_seconds)
    return response.status_code, response.text


def _cli(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send a greeting request to the greeting service.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Service base URL")
    parser.add_argument("--addressee", default="Barry", help="Addressee field; pass --no-addressee to omit")
    parser.add_argument("--no-addressee", action="store_true", help="Leave the addressee out of the body")
    parser.add_argument("--tone", default="Mean", help="Tone field; pass --no-tone to omit")
    parser.add_argument("--no-tone", action="store_true", help="Leave the tone out of the body")
    parser.add_argument(
        "--capitalized-keys",
        action="store_true",
        help="Send `Addressee`/`Tone` keys instead of lower-case ones",
    )
    args = parser.parse_args(argv)

    status_code, body = send_greeting(
        args.base_url,
        addressee=None if args.no_addressee else args.addressee,
        tone=None if args.no_tone else args.tone,
        capitalized_keys=args.capitalized_keys,
    )

    print(f"status: {status_code}")
    print(body)

    return 0 if status_code < 400 else 1


def main() -> None:
    """CLI entrypoint."""
    raise SystemExit(_cli())


if __name__ == "__main__":
    main()
