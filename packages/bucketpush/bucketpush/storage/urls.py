"""URL helpers for object media links."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit


def strip_query_params(url: str) -> str:
    """Drop the query component of ``url``, keeping everything else as given.

    Relative and scheme-relative references are accepted. Raises ValueError
    only when ``url`` cannot be parsed (a broken IPv6 host or a non-numeric
    port).
    """
    parts = urlsplit(url)
    # urlsplit defers port validation; reading .port raises ValueError.
    parts.port
    return urlunsplit(parts._replace(query=""))
