"""Slug helpers for job URLs."""

import re
import unicodedata


def slugify(text: str) -> str:
    """Lowercase ASCII slug with single dashes, e.g. "Senior Dev (Remote)" -> "senior-dev-remote"."""
    normalized = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", normalized.lower())
    return slug.strip("-")
