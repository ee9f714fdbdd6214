# query/_tables.py

import re

# Lookup tables are scanned in order; the first entry found in the
# lower-cased query wins, so more general keywords must come first.

DOMAINS: tuple[str, ...] = (
    "ai", "artificial intelligence", "machine learning", "ml", "deep learning",
    "fintech", "finance", "banking", "payments",
    "saas", "software", "b2b", "enterprise",
    "biotech", "healthcare", "health", "medical", "pharma",
    "crypto", "blockchain", "web3", "defi", "nft",
    "climate", "cleantech", "sustainability", "green",
    "ecommerce", "e-commerce", "retail", "marketplace",
    "devtools", "developer", "infrastructure", "api",
    "edtech", "education", "learning",
    "gaming", "games", "entertainment",
    "social", "community", "network",
    "security", "cybersecurity", "privacy",
    "robotics", "automation", "iot",
    "space", "aerospace",
    "food", "foodtech", "agriculture", "agtech",
    "real estate", "proptech", "property",
    "travel", "hospitality", "tourism",
    "hr", "hiring", "recruitment", "talent",
    "legal", "legaltech",
    "insurance", "insurtech",
)  # fmt: skip

FUNDING_STAGES: tuple[str, ...] = (
    "pre-seed", "preseed",
    "seed",
    "series a", "series-a",
    "series b", "series-b",
    "series c", "series-c",
    "series d", "series-d",
    "bootstrapped", "bootstrap",
    "ipo", "public",
)  # fmt: skip

LOCATIONS: tuple[str, ...] = (
    "usa", "us", "united states", "america",
    "uk", "united kingdom", "britain", "england",
    "europe", "eu",
    "india",
    "china",
    "germany",
    "france",
    "canada",
    "australia",
    "singapore",
    "israel",
    "japan",
    "remote",
    "san francisco", "sf", "bay area", "silicon valley",
    "new york", "nyc",
    "london",
    "berlin",
    "paris",
    "bangalore", "bengaluru",
    "tel aviv",
)  # fmt: skip

# None marks a pattern whose first group carries the number of days
TIMEFRAME_PATTERNS: tuple[tuple[re.Pattern[str], int | None], ...] = (
    (re.compile(r"today", re.IGNORECASE), 1),
    (re.compile(r"yesterday", re.IGNORECASE), 2),
    (re.compile(r"this week|last 7 days|past week", re.IGNORECASE), 7),
    (re.compile(r"this month|last 30 days|past month", re.IGNORECASE), 30),
    (re.compile(r"this quarter|last 90 days|past 3 months", re.IGNORECASE), 90),
    (re.compile(r"this year|last 365 days|past year", re.IGNORECASE), 365),
    (re.compile(r"last (\d+) days?", re.IGNORECASE), None),
    (re.compile(r"(\d+) days? ago", re.IGNORECASE), None),
)

# checked in this order; the first matching intent wins
LIST_INTENT = re.compile(r"show me|list|what are|find all", re.IGNORECASE)
RECENT_INTENT = re.compile(r"recent|new|latest|just launched", re.IGNORECASE)
FUNDED_INTENT = re.compile(r"funded|raised|funding|investment", re.IGNORECASE)

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "up", "about", "into", "through", "during",
        "show", "me", "find", "search", "get", "list", "all", "startups",
        "companies", "startup", "company", "are", "is", "was", "were", "been",
        "being", "have", "has", "had", "do", "does", "did", "will", "would",
        "could", "should", "what", "which", "who", "when", "where", "why",
        "how", "that", "this", "these", "those",
    },
)  # fmt: skip
