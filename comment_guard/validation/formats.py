"""
Format checks for single scalar values (email, IP, URL).

All checks are permissive by intent and return False for non-string input.
"""
import re
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from comment_guard.config.constants import EMAIL_PATTERN, IPV4_PATTERN, IPV6_PATTERN

_EMAIL_RE = re.compile(EMAIL_PATTERN)
_IPV4_RE = re.compile(IPV4_PATTERN)
_IPV6_RE = re.compile(IPV6_PATTERN)
_URL_ADAPTER = TypeAdapter(AnyUrl)


def is_valid_email(email: Any) -> bool:
    """Single ``@``, no whitespace, a dot in the domain. Not RFC 5322."""
    return isinstance(email, str) and _EMAIL_RE.fullmatch(email) is not None


def is_valid_ip(ip: Any) -> bool:
    """
    Dotted-quad IPv4, or IPv6 written as eight full groups.

    The only compressed IPv6 forms accepted are ``::1`` and ``::``;
    anything else using ``::`` is rejected.
    """
    if not isinstance(ip, str):
        return False
    return _IPV4_RE.fullmatch(ip) is not None or _IPV6_RE.fullmatch(ip) is not None


def is_valid_url(url: Any) -> bool:
    """
    True when *url* parses as an absolute URL under WHATWG rules.

    Special schemes (http, https, ftp, ws, wss, file) follow the standard's
    host and port rules; tabs and newlines inside the URL are ignored, as a
    browser's URL parser does.
    """
    if not isinstance(url, str):
        return False
    try:
        _URL_ADAPTER.validate_python(url)
    except ValidationError:
        return False
    return True
