"""Utility for recognising scheme-qualified references."""

import re
from urllib.parse import urlsplit

# Two or more characters so that Windows drive letters (C:\...) are not schemes.
URI_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]+:")


def is_uri(text: str) -> bool:
    """Check whether ``text`` is a reference with an explicit scheme.

    References that look scheme-qualified but fail to parse are not URIs.
    """
    if not URI_SCHEME_RE.match(text):
        return False
    try:
        return bool(urlsplit(text).scheme)
    except ValueError:
        return False
