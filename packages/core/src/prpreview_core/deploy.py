"""Channel deploy results as reported by the hosting CLI (``--json`` output).

A deploy either succeeds with one entry per site::

    {"status": "success", "result": {"my-site": {"site": "my-site", "url": "...", "expireTime": "..."}}}

or fails::

    {"status": "error", "error": "HTTP Error: 404, Requested entity was not found."}
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime

from prpreview_core.errors import DeployResultError

# Timestamps carry anywhere from 1 to 9 fractional digits ("2020-10-27T21:32:57.233344586Z");
# fromisoformat on 3.10 only takes exactly 3 or 6, so fractions are normalised to 6.
_FRACTION_RE = re.compile(r"\.(\d+)")


@dataclass
class SiteDeploy:
    site: str
    url: str
    expire_time: str
    target: str | None = None


@dataclass
class ChannelSuccessResult:
    result: dict[str, SiteDeploy]
    status: str = "success"


@dataclass
class ErrorResult:
    error: str
    status: str = "error"


@dataclass
class ChannelDeployInfo:
    urls: list[str]
    expire_time: datetime
    expire_time_formatted: str


def parse_deploy_result(data: dict) -> ChannelSuccessResult | ErrorResult:
    """Build a deploy result from the decoded JSON payload."""
    if not isinstance(data, dict):
        raise DeployResultError(f"Deploy result must be a JSON object, got {type(data).__name__}.")

    status = data.get("status")
    if status == "error":
        return ErrorResult(error=str(data.get("error") or "Unknown deploy error"))
    if status != "success":
        raise DeployResultError(f"Unknown deploy status: {status!r}")

    sites: dict[str, SiteDeploy] = {}
    for key, entry in (data.get("result") or {}).items():
        try:
            sites[key] = SiteDeploy(
                site=entry.get("site", key),
                url=entry["url"],
                expire_time=entry["expireTime"],
                target=entry.get("target"),
            )
        except (KeyError, AttributeError) as e:
            raise DeployResultError(f"Malformed deploy entry for {key!r}: missing {e}") from e
        parse_timestamp(sites[key].expire_time)

    if not sites:
        raise DeployResultError("Successful deploy result contains no sites.")
    return ChannelSuccessResult(result=sites)


def _normalise_fraction(match: re.Match) -> str:
    return "." + match.group(1)[:6].ljust(6, "0")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime."""
    text = _FRACTION_RE.sub(_normalise_fraction, str(value).strip())
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise DeployResultError(f"Invalid expire time: {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_http_date(moment: datetime) -> str:
    """RFC 7231 HTTP-date, e.g. ``Tue, 27 Oct 2020 21:32:57 GMT``."""
    return format_datetime(moment.astimezone(timezone.utc).replace(microsecond=0), usegmt=True)


def interpret_channel_deploy_result(result: ChannelSuccessResult) -> ChannelDeployInfo:
    deploys = list(result.result.values())
    if not deploys:
        raise DeployResultError("Channel deploy result contains no sites.")
    expire_time = parse_timestamp(deploys[0].expire_time)
    return ChannelDeployInfo(
        urls=[d.url for d in deploys],
        expire_time=expire_time,
        expire_time_formatted=format_http_date(expire_time),
    )
