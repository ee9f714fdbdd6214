# _utils/extract.py

import re

_LAUNCH_PREFIX = re.compile(
    r"^(?:Show HN|Launching|Launch|Introducing|Meet|I built|We built"
    r"|Just launched|Check out|Announcing)[:\s-]*",
    re.IGNORECASE,
)
_LEADING_DETERMINER = re.compile(r"^(?:My|Our|The|A|An)\s+", re.IGNORECASE)
_TITLE_SEPARATORS = (" - ", " – ", " — ", ": ", " | ", " / ")
_NAME_NOISE = re.compile(r"[^\w\s.-]")
_MAX_NAME_WORDS = 3

_FUNDING_PATTERNS = (
    re.compile(r"\$(\d+(?:\.\d+)?)\s*(million|m|billion|b|k|thousand)", re.IGNORECASE),
    re.compile(r"raised\s+\$?(\d+(?:\.\d+)?)\s*(million|m|billion|b|k)?", re.IGNORECASE),
    re.compile(r"(\d+(?:\.\d+)?)\s*(million|m|billion|b)\s*(?:usd|dollars?)?", re.IGNORECASE),
    re.compile(r"series\s+[a-z]", re.IGNORECASE),
    re.compile(r"seed\s+round", re.IGNORECASE),
)


def extract_startup_name(title: str) -> str:
    """
    Guess a startup's name from a launch announcement title.

    Strips launch phrasing ("Show HN", "Introducing", ...) and a leading
    determiner, keeps the part before the first separator, drops punctuation
    and limits the result to three words.

    Returns:
        str: The guessed name, possibly empty.
    """
    name = _LAUNCH_PREFIX.sub("", title, count=1)
    name = _LEADING_DETERMINER.sub("", name, count=1)

    for separator in _TITLE_SEPARATORS:
        if separator in name:
            name = name.split(separator, 1)[0]
            break

    name = _NAME_NOISE.sub("", name).strip()
    return " ".join(name.split()[:_MAX_NAME_WORDS])


def extract_funding(text: str) -> str | None:
    """
    Find a funding mention in free text.

    Amounts are normalised to "$<n>K", "$<n>M" or "$<n>B"; round mentions such
    as "Series B" or "seed round" are returned as written.

    Returns:
        str | None: The funding mention, or None if the text has none.
    """
    for pattern in _FUNDING_PATTERNS:
        match = pattern.search(text)
        if match is None:
            continue

        groups = match.groups()
        if len(groups) >= 2 and groups[0] and groups[1]:
            return _format_amount(groups[0], groups[1])

        return match.group(0)

    return None


def _format_amount(number: str, unit: str) -> str:
    amount = f"{float(number):g}"
    unit = unit.lower()

    if unit.startswith("b"):
        return f"${amount}B"
    if unit.startswith("m"):
        return f"${amount}M"
    return f"${amount}K"
