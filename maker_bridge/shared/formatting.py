"""Small formatting helpers shared across layers."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from maker_bridge.shared.consts import ACCESS_TOKEN_PARAM, REDACTED

_TOKEN_PATTERN = re.compile(rf"({ACCESS_TOKEN_PARAM}=)[^&\s]*")


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """Render a UTC timestamp as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    value = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def redact_token(text: str) -> str:
    """Mask the value of any ``access_token`` query parameter in ``text``."""
    if not text:
        return text
    return _TOKEN_PATTERN.sub(rf"\g<1>{REDACTED}", text)


def redact_url(url: str) -> str:
    """Strip user info from a URL and mask its access token."""
    if not url:
        return url

    parsed = urlsplit(url)
    if parsed.username or parsed.password:
        hostname = parsed.hostname or ""
        port_part = f":{parsed.port}" if parsed.port else ""
        parsed = parsed._replace(netloc=f"{hostname}{port_part}")

    return redact_token(urlunsplit(parsed))
