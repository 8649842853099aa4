"""
Tests for pricing rules: compute_amount, compute_volume_credits.
"""

from __future__ import annotations

import logging

import pytest

from theater.domains.errors import UnknownPlayType
from theater.domains.models import PlayType
from theater.domains.pricing import compute_amount, compute_volume_credits


@pytest.mark.parametrize("audience", [0, 1, 15, 29, 30])
def test_tragedy_flat_rate_up_to_30(audience: int) -> None:
    """Tragedies with 30 or fewer seats cost the base amount."""
    assert compute_amount(audience, PlayType.TRAGEDY) == 40000


@pytest.mark.parametrize("audience", [31, 40, 55, 100])
def test_tragedy_over_30(audience: int) -> None:
    """Each tragedy seat over 30 adds 1000 cents."""
    assert compute_amount(audience, PlayType.TRAGEDY) == 40000 + (audience - 30) * 1000


@pytest.mark.parametrize("audience", [0, 5, 19, 20])
def test_comedy_up_to_20(audience: int) -> None:
    """Comedies with 20 or fewer seats cost base plus 300 per seat."""
    assert compute_amount(audience, PlayType.COMEDY) == 30000 + 300 * audience


@pytest.mark.parametrize("audience", [21, 35, 60])
def test_comedy_over_20(audience: int) -> None:
    """Comedies over 20 seats add a flat 10000 and 500 per extra seat."""
    expected = 30000 + 10000 + (audience - 20) * 500 + 300 * audience
    assert compute_amount(audience, PlayType.COMEDY) == expected


def test_comedy_35_seats() -> None:
    """35-seat comedy: $580.00 and 12 credits."""
    assert compute_amount(35, "comedy") == 58000
    assert compute_volume_credits(35, "comedy") == 12


def test_amount_accepts_genre_strings() -> None:
    """Raw genre strings price the same as the enum."""
    assert compute_amount(55, "tragedy") == compute_amount(55, PlayType.TRAGEDY) == 65000


def test_amount_rejects_unknown_genre() -> None:
    """Unknown genres raise UnknownPlayType carrying the genre."""
    with pytest.raises(UnknownPlayType) as exc_info:
        compute_amount(10, "history")
    assert exc_info.value.play_type == "history"
    assert str(exc_info.value) == "unknown type: history"


@pytest.mark.parametrize("audience", [0, 10, 30, 31, 47, 100])
def test_credits_by_genre(audience: int) -> None:
    """Tragedy earns seats over 30; comedy adds one per five seats."""
    base = max(audience - 30, 0)
    assert compute_volume_credits(audience, PlayType.TRAGEDY) == base
    assert compute_volume_credits(audience, PlayType.COMEDY) == base + audience // 5


def test_credits_unknown_genre_does_not_raise(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown genres earn base credits only and log a warning."""
    with caplog.at_level(logging.WARNING, logger="theater"):
        assert compute_volume_credits(45, "history") == 15
    assert any("history" in r.getMessage() for r in caplog.records)


def test_credits_known_genre_does_not_warn(caplog: pytest.LogCaptureFixture) -> None:
    """Recognized genres do not log."""
    with caplog.at_level(logging.WARNING, logger="theater"):
        compute_volume_credits(45, "tragedy")
    assert caplog.records == []


@pytest.mark.parametrize("audience, expected", [(-7, -1), (-5, -1), (-4, 0), (7, 1)])
def test_comedy_credits_truncate_toward_zero(audience: int, expected: int) -> None:
    """Comedy bonus division truncates toward zero, including negative audiences."""
    assert compute_volume_credits(audience, PlayType.COMEDY) == expected


def test_negative_audience_goes_through_formulas() -> None:
    """Negative audiences are not validated; the formulas apply as written."""
    assert compute_amount(-10, PlayType.TRAGEDY) == 40000
    assert compute_amount(-10, PlayType.COMEDY) == 30000 - 3000
    assert compute_volume_credits(-10, PlayType.TRAGEDY) == 0
