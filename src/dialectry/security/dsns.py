"""Database URL parsing and redaction utilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlparse


@dataclass
class DatabaseURL:
    scheme: str
    username: Optional[str]
    password: Optional[str]
    host: Optional[str]
    port: Optional[int]
    database: Optional[str]
    path: str
    query: dict[str, str] = field(default_factory=dict)

    @property
    def backend(self) -> str:
        """
        Scheme without the ``+driver`` suffix, e.g. ``postgresql`` for ``postgresql+psycopg``.
        """

        return self.scheme.split("+", 1)[0].lower()

    def redacted(self) -> str:
        """
        Return the URL with credentials redacted but structure preserved.
        """

        netloc = ""
        if self.username:
            netloc += self.username
            if self.password:
                netloc += ":***"
            netloc += "@"
        if self.host:
            netloc += self.host
        if self.port:
            netloc += f":{self.port}"

        query_string = urlencode(self.query) if self.query else ""

        # Build manually so we retain the double slash prefix even when netloc is empty
        result = f"{self.scheme}://"
        if netloc:
            result += netloc
        result += self.path or ""
        if query_string:
            result += f"?{query_string}"
        return result


def parse_url(url: str) -> DatabaseURL:
    parsed = urlparse(url)
    query = {k: v[0] for k, v in parse_qs(parsed.query).items()}
    return DatabaseURL(
        scheme=parsed.scheme,
        username=parsed.username,
        password=parsed.password,
        host=parsed.hostname,
        port=parsed.port,
        database=parsed.path.lstrip("/") or None,
        path=parsed.path or "",
        query=query,
    )


def redact_url(url: str) -> str:
    """
    Redact credentials from ``url`` for logging; non-hierarchical URLs are returned as-is.
    """

    if "://" not in url:
        return url
    try:
        return parse_url(url).redacted()
    except ValueError:
        return url.split("://", 1)[0] + "://***"
