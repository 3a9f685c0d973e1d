"""Utility functions for ytm_innertube.

Available via `from ytm_innertube.utils import ...` for power users.
Not re-exported at the top-level `ytm_innertube` package.
"""

from ytm_innertube.utils.cookies import (
    auth_headers,
    build_cookie_header,
    cookie_file_to_header,
    parse_cookie_header,
    parse_netscape_cookies,
)
from ytm_innertube.utils.text import parse_duration, parse_int

__all__ = [
    "auth_headers",
    "build_cookie_header",
    "cookie_file_to_header",
    "parse_cookie_header",
    "parse_duration",
    "parse_int",
    "parse_netscape_cookies",
]
