"""Cookie helpers for authenticated InnerTube requests.

Turns a browser cookie export or a raw Cookie header into the
SAPISIDHASH authorization headers that logged-in requests carry.
"""

import hashlib
import logging
import time
from pathlib import Path

from ytmusicapi.constants import YTM_DOMAIN

logger = logging.getLogger(__name__)

# Newer exports carry the secure variant; both hold the same secret
SAPISID_NAMES = ("__Secure-3PAPISID", "SAPISID")

# domain, include_subdomains, path, secure, expiry, name, value
NETSCAPE_FIELDS = 7
HTTP_ONLY_PREFIX = "#HttpOnly_"


def parse_netscape_cookies(cookies_path: Path) -> dict[str, str]:
    """Read the name/value pairs of a Netscape cookies.txt export.

    Args:
        cookies_path: Exported cookies file.

    Returns:
        Cookie values by name. Empty if the file cannot be read.
    """
    try:
        lines = cookies_path.read_text().splitlines()
    except OSError as e:
        logger.warning("Cannot read cookies from %s: %s", cookies_path, e)
        return {}

    parsed: dict[str, str] = {}
    for raw in lines:
        entry = raw.strip().removeprefix(HTTP_ONLY_PREFIX)
        if not entry or entry.startswith("#"):
            continue
        fields = entry.split("\t")
        if len(fields) < NETSCAPE_FIELDS:
            continue
        parsed[fields[5]] = fields[6]
    return parsed


def parse_cookie_header(cookie: str) -> dict[str, str]:
    """Split a raw Cookie header ("a=1; b=2") into a dict."""
    parsed: dict[str, str] = {}
    for pair in cookie.split(";"):
        name, sep, value = pair.strip().partition("=")
        if sep and name:
            parsed[name] = value
    return parsed


def build_cookie_header(cookies: dict[str, str]) -> str:
    return "; ".join(f"{name}={value}" for name, value in cookies.items())


def get_sapisid(cookies: dict[str, str]) -> str | None:
    """SAPISID secret of a cookie dict, preferring the secure variant."""
    for name in SAPISID_NAMES:
        if cookies.get(name):
            return cookies[name]
    return None


def generate_sapisidhash(sapisid: str, origin: str = YTM_DOMAIN) -> str:
    """Authorization value proving ownership of the SAPISID cookie.

    The value is ``SAPISIDHASH <ts>_<sha1("<ts> <sapisid> <origin>")>``
    where ``ts`` is the current unix time in seconds.

    Args:
        sapisid: SAPISID cookie value.
        origin: Origin the request claims to come from.
    """
    now = int(time.time())
    digest = hashlib.sha1(f"{now} {sapisid} {origin}".encode()).hexdigest()
    return f"SAPISIDHASH {now}_{digest}"


def auth_headers(cookie: str, origin: str = YTM_DOMAIN) -> dict[str, str] | None:
    """Build the headers of a logged-in request.

    Args:
        cookie: Raw Cookie header value.
        origin: Origin used for the SAPISIDHASH.

    Returns:
        Header dict, or None if the cookie has no SAPISID.
    """
    sapisid = get_sapisid(parse_cookie_header(cookie))
    if not sapisid:
        logger.debug("Cookie has no SAPISID, sending request anonymously")
        return None

    return {
        "Authorization": generate_sapisidhash(sapisid, origin),
        "Cookie": cookie,
        "X-Goog-AuthUser": "0",
        "X-Origin": origin,
    }


def cookie_file_to_header(cookies_path: Path) -> str | None:
    """Read a cookies.txt file into a Cookie header value.

    Returns:
        Cookie header, or None if the file is missing or has no SAPISID.
    """
    if not cookies_path.is_file():
        logger.debug("No cookies file at %s", cookies_path)
        return None

    cookies = parse_netscape_cookies(cookies_path)
    if get_sapisid(cookies) is None:
        logger.warning(
            "Cookies in %s carry no SAPISID, staying anonymous", cookies_path
        )
        return None
    return build_cookie_header(cookies)
