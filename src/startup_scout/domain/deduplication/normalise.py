# deduplication/normalise.py

import re

_CORPORATE_SUFFIXES = ("inc", "llc", "ltd", "corp", "co", "company")

_LEADING_ARTICLE = re.compile(r"^(?:the|a|an)\s+", re.IGNORECASE)

# suffix must be its own word, so "Cisco" keeps its trailing "co"
_TRAILING_SUFFIX = re.compile(
    r"[\s,]+(?:" + "|".join(_CORPORATE_SUFFIXES) + r")\.?\s*$",
    re.IGNORECASE,
)

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """
    Canonicalise a company name into a grouping key for deduplication.

    Lower-cases the name, drops a leading article, strips trailing corporate
    suffixes such as Inc. or LLC (repeatedly, so stacked forms like
    "Company, Inc." are removed), removes punctuation and collapses
    whitespace.

    Returns:
        str: The canonical key, e.g. "The Auth0 Company, Inc." -> "auth0".
    """
    key = _LEADING_ARTICLE.sub("", name.lower(), count=1)
    key = _strip_corporate_suffixes(key)
    key = _NON_WORD.sub("", key)
    return _WHITESPACE.sub(" ", key).strip()


def _strip_corporate_suffixes(name: str) -> str:
    """
    Remove trailing corporate suffixes until none remain.

    Returns:
        str: The name without trailing legal form indicators.
    """
    stripped = _TRAILING_SUFFIX.sub("", name, count=1)
    while stripped != name:
        name = stripped
        stripped = _TRAILING_SUFFIX.sub("", name, count=1)
    return stripped
