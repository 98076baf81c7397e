"""Header redaction for request debug logs."""

from typing import Mapping

SENSITIVE_HEADERS = frozenset({"authorization", "proxy-authorization"})


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy headers with credential values masked, safe for debug logs."""
    redacted: dict[str, str] = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            scheme = value.split(" ", 1)[0] if " " in value else ""
            redacted[key] = f"{scheme} ***".strip()
        else:
            redacted[key] = value
    return redacted
