"""Explicit release-feed check. Nothing here runs unless the user asks for it."""
import logging
import re

from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)


class UpdateCheckError(Exception):
    pass


@dataclass(frozen=True)
class UpdateStatus:
    current: str
    latest: str
    update_available: bool


def parse_version(text: str) -> tuple[int, ...]:
    """'v1.2.3' -> (1, 2, 3). Pre-release suffixes after the numbers are ignored."""
    m = re.match(r"^\s*v?(\d+(?:\.\d+)*)", text)
    if not m:
        raise UpdateCheckError(f"Unrecognized version: {text!r}")
    return tuple(int(part) for part in m.group(1).split("."))


def _newer(latest: str, current: str) -> bool:
    a, b = parse_version(latest), parse_version(current)
    width = max(len(a), len(b))
    return a + (0,) * (width - len(a)) > b + (0,) * (width - len(b))


def check_for_update(current_version: str, url: str, *, timeout: float = 5.0,
                     client: httpx.Client | None = None) -> UpdateStatus:
    """Fetch the latest release JSON from ``url`` and compare its ``tag_name``."""
    own_client = client is None
    http = client or httpx.Client(timeout=timeout, headers={"Accept": "application/vnd.github+json"})
    try:
        resp = http.get(url)
        resp.raise_for_status()
        payload = resp.json()
    except httpx.HTTPError as exc:
        raise UpdateCheckError(f"Update check failed: {exc}") from exc
    except ValueError as exc:
        raise UpdateCheckError("Release feed returned invalid JSON") from exc
    finally:
        if own_client:
            http.close()

    tag = payload.get("tag_name") if isinstance(payload, dict) else None
    if not isinstance(tag, str):
        raise UpdateCheckError("Release feed has no tag_name")
    latest = tag.lstrip("v")
    logger.debug("latest release %s, running %s", latest, current_version)
    return UpdateStatus(current=current_version, latest=latest, update_available=_newer(latest, current_version))
