"""Security helpers for dialectry."""

from .dsns import DatabaseURL, parse_url, redact_url
from .redaction import redact_properties

__all__ = ["DatabaseURL", "parse_url", "redact_properties", "redact_url"]
