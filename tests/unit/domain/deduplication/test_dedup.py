# deduplication/test_dedup.py

import pytest

from startup_scout.domain.deduplication import deduplicate_startups
from startup_scout.schemas import StartupData

pytestmark = pytest.mark.unit


def _startup(name: str, **fields: object) -> StartupData:
    """
    Build a StartupData with sensible defaults for testing.
    """
    defaults: dict[str, object] = {
        "description": "",
        "tags": [],
        "sources": [],
        "source_urls": [],
        "confidence_score": 0.5,
    }
    return StartupData(name=name, **{**defaults, **fields})


def test_exact_normalised_match_merges_sources_in_order() -> None:
    """
    ARRANGE: "Acme Inc" from source a and "Acme" from source b
    ACT:     deduplicate_startups
    ASSERT:  one record with sources ["a", "b"]
    """
    startups = [
        _startup("Acme Inc", sources=["a"]),
        _startup("Acme", sources=["b"]),
    ]

    actual = deduplicate_startups(startups)

    assert [s.sources for s in actual] == [["a", "b"]]


def test_merge_raises_confidence_per_new_source() -> None:
    """
    ARRANGE: duplicate with one new source, base confidence 0.5
    ACT:     deduplicate_startups
    ASSERT:  confidence raised by 0.1
    """
    startups = [
        _startup("Acme Inc", sources=["a"], confidence_score=0.5),
        _startup("Acme", sources=["b"], confidence_score=0.5),
    ]

    actual = deduplicate_startups(startups)

    assert actual[0].confidence_score == pytest.approx(0.6)


def test_merge_caps_confidence_at_one() -> None:
    """
    ARRANGE: retained confidence 0.95, duplicate brings three sources
    ACT:     deduplicate_startups
    ASSERT:  confidence is exactly 1.0
    """
    startups = [
        _startup("Acme", sources=["a"], confidence_score=0.95),
        _startup("Acme", sources=["b", "c", "d"]),
    ]

    actual = deduplicate_startups(startups)

    assert actual[0].confidence_score == 1.0


def test_merge_does_not_repeat_sources_or_urls() -> None:
    """
    ARRANGE: duplicates sharing a source and a URL
    ACT:     deduplicate_startups
    ASSERT:  shared entries appear once
    """
    startups = [
        _startup("Acme", sources=["a"], source_urls=["https://x/1"]),
        _startup("Acme", sources=["a", "b"], source_urls=["https://x/1", "https://x/2"]),
    ]

    actual = deduplicate_startups(startups)

    assert (actual[0].sources, actual[0].source_urls) == (
        ["a", "b"],
        ["https://x/1", "https://x/2"],
    )


def test_merge_tags_is_union_without_duplicates() -> None:
    """
    ARRANGE: duplicates with overlapping tags
    ACT:     deduplicate_startups
    ASSERT:  tags equal the union of both inputs
    """
    startups = [
        _startup("Acme", tags=["AI", "SaaS"]),
        _startup("Acme", tags=["SaaS", "B2B"]),
    ]

    actual = deduplicate_startups(startups)

    assert actual[0].tags == ["AI", "SaaS", "B2B"]


def test_merge_keeps_longer_description() -> None:
    """
    ARRANGE: later duplicate has a longer description
    ACT:     deduplicate_startups
    ASSERT:  longer description retained
    """
    expected = "Acme builds anvils for coyotes"
    startups = [
        _startup("Acme", description="Anvils"),
        _startup("Acme", description=expected),
    ]

    actual = deduplicate_startups(startups)

    assert actual[0].description == expected


def test_merge_keeps_existing_description_when_equal_length() -> None:
    """
    ARRANGE: duplicates with equally long descriptions
    ACT:     deduplicate_startups
    ASSERT:  first description retained
    """
    startups = [
        _startup("Acme", description="first"),
        _startup("Acme", description="later"),
    ]

    actual = deduplicate_startups(startups)

    assert actual[0].description == "first"


def test_merge_replaces_undisclosed_funding() -> None:
    """
    ARRANGE: retained funding "Undisclosed", duplicate reports "$5M"
    ACT:     deduplicate_startups
    ASSERT:  funding becomes "$5M"
    """
    startups = [
        _startup("Acme", funding_amount="Undisclosed"),
        _startup("Acme", funding_amount="$5M"),
    ]

    actual = deduplicate_startups(startups)

    assert actual[0].funding_amount == "$5M"


def test_merge_keeps_known_funding() -> None:
    """
    ARRANGE: retained funding "$2M", duplicate reports "$5M"
    ACT:     deduplicate_startups
    ASSERT:  funding stays "$2M"
    """
    startups = [
        _startup("Acme", funding_amount="$2M"),
        _startup("Acme", funding_amount="$5M"),
    ]

    actual = deduplicate_startups(startups)

    assert actual[0].funding_amount == "$2M"


def test_merge_does_not_replace_funding_with_undisclosed() -> None:
    """
    ARRANGE: retained funding absent, duplicate reports "Undisclosed"
    ACT:     deduplicate_startups
    ASSERT:  funding stays absent
    """
    startups = [
        _startup("Acme"),
        _startup("Acme", funding_amount="Undisclosed"),
    ]

    actual = deduplicate_startups(startups)

    assert actual[0].funding_amount is None


def test_merge_replaces_remote_location_with_specific_one() -> None:
    """
    ARRANGE: retained location "Remote", duplicate reports "Berlin"
    ACT:     deduplicate_startups
    ASSERT:  location becomes "Berlin"
    """
    startups = [
        _startup("Acme", location="Remote"),
        _startup("Acme", location="Berlin"),
    ]

    actual = deduplicate_startups(startups)

    assert actual[0].location == "Berlin"


def test_merge_keeps_specific_location() -> None:
    """
    ARRANGE: retained location "Paris", duplicate reports "Berlin"
    ACT:     deduplicate_startups
    ASSERT:  location stays "Paris"
    """
    startups = [
        _startup("Acme", location="Paris"),
        _startup("Acme", location="Berlin"),
    ]

    actual = deduplicate_startups(startups)

    assert actual[0].location == "Paris"


def test_merge_fills_missing_website_only() -> None:
    """
    ARRANGE: first pair lacks a website, second pair already has one
    ACT:     deduplicate_startups
    ASSERT:  missing website filled, existing website untouched
    """
    startups = [
        _startup("Acme"),
        _startup("Acme", website="https://acme.io"),
        _startup("Globex", website="https://globex.com"),
        _startup("Globex", website="https://globex.net"),
    ]

    actual = deduplicate_startups(startups)

    assert [s.website for s in actual] == ["https://acme.io", "https://globex.com"]


def test_fuzzy_match_merges_near_duplicate_names() -> None:
    """
    ARRANGE: names differing by one character out of ten
    ACT:     deduplicate_startups with default threshold
    ASSERT:  merged into a single group
    """
    startups = [
        _startup("Lightspeed", sources=["a"]),
        _startup("Lightspeet", sources=["b"]),
    ]

    actual = deduplicate_startups(startups)

    assert len(actual) == 1


def test_names_below_threshold_stay_separate() -> None:
    """
    ARRANGE: two clearly different names
    ACT:     deduplicate_startups
    ASSERT:  two groups in first-seen order
    """
    startups = [_startup("Stripe"), _startup("Notion")]

    actual = deduplicate_startups(startups)

    assert [s.name for s in actual] == ["Stripe", "Notion"]


def test_fuzzy_match_uses_first_qualifying_group() -> None:
    """
    ARRANGE: two existing groups both within a loose threshold of a new name
    ACT:     deduplicate_startups with threshold 0.5
    ASSERT:  new record merges into the first-inserted group
    """
    startups = [
        _startup("abcd", sources=["first"]),
        _startup("wxyz", sources=["second"]),
        _startup("abyz", sources=["new"]),
    ]

    actual = deduplicate_startups(startups, similarity_threshold=0.5)

    assert [s.sources for s in actual] == [["first", "new"], ["second"]]


def test_group_retains_first_seen_name() -> None:
    """
    ARRANGE: "Acme Inc" followed by "Acme"
    ACT:     deduplicate_startups
    ASSERT:  retained record keeps the first display name
    """
    startups = [_startup("Acme Inc"), _startup("Acme")]

    actual = deduplicate_startups(startups)

    assert actual[0].name == "Acme Inc"


def test_deduplicate_does_not_mutate_inputs() -> None:
    """
    ARRANGE: two duplicates
    ACT:     deduplicate_startups
    ASSERT:  first input keeps its original sources
    """
    first = _startup("Acme", sources=["a"])
    startups = [first, _startup("Acme", sources=["b"])]

    deduplicate_startups(startups)

    assert first.sources == ["a"]


def test_deduplicate_empty_input_returns_empty() -> None:
    """
    ARRANGE: no startups
    ACT:     deduplicate_startups
    ASSERT:  returns empty list
    """
    actual = deduplicate_startups([])

    assert actual == []
