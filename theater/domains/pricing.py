"""
Pricing rules for a single performance.
Amounts are integer cents; credits are integer loyalty points.
"""

from __future__ import annotations

from theater.domains.errors import UnknownPlayType
from theater.domains.models import PlayType
from theater.utils.logger import get_logger

logger = get_logger()

# Volume credits
BASE_VOLUME_CREDIT_THRESHOLD = 30
COMEDY_EXTRA_VOLUME_FACTOR = 5

# Tragedy pricing
TRAGEDY_BASE_AMOUNT = 40_000
TRAGEDY_AUDIENCE_THRESHOLD = 30
TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON = 1_000

# Comedy pricing
COMEDY_BASE_AMOUNT = 30_000
COMEDY_AUDIENCE_THRESHOLD = 20
COMEDY_OVER_BASE_CAPACITY_AMOUNT = 10_000
COMEDY_OVER_BASE_CAPACITY_PER_PERSON = 500
COMEDY_AMOUNT_PER_AUDIENCE = 300


def _tragedy_amount(audience: int) -> int:
    amount = TRAGEDY_BASE_AMOUNT
    if audience > TRAGEDY_AUDIENCE_THRESHOLD:
        amount += (audience - TRAGEDY_AUDIENCE_THRESHOLD) * TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON
    return amount


def _comedy_amount(audience: int) -> int:
    amount = COMEDY_BASE_AMOUNT
    if audience > COMEDY_AUDIENCE_THRESHOLD:
        amount += (
            COMEDY_OVER_BASE_CAPACITY_AMOUNT
            + (audience - COMEDY_AUDIENCE_THRESHOLD) * COMEDY_OVER_BASE_CAPACITY_PER_PERSON
        )
    return amount + COMEDY_AMOUNT_PER_AUDIENCE * audience


def _truncated_div(numerator: int, denominator: int) -> int:
    # Rounds toward zero, unlike //
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def compute_amount(audience: int, genre: PlayType | str) -> int:
    """
    Return the charge in cents for one performance.

    Tragedy: 40000, plus 1000 per seat over 30.
    Comedy: 30000, plus 10000 + 500 per seat over 20 when above 20, plus 300 per seat.

    Raises:
        UnknownPlayType: If the genre has no pricing rule.
    """
    play_type = PlayType.parse(genre)
    if play_type is PlayType.TRAGEDY:
        return _tragedy_amount(audience)
    if play_type is PlayType.COMEDY:
        return _comedy_amount(audience)
    raise UnknownPlayType(str(genre))


def compute_volume_credits(audience: int, genre: PlayType | str) -> int:
    """
    Return the volume credits earned by one performance.

    One credit per seat over 30; comedies add one credit per five seats,
    with the division truncated toward zero.
    Unrecognized genres earn only the base credits and do not raise.
    """
    credits = max(audience - BASE_VOLUME_CREDIT_THRESHOLD, 0)
    play_type = PlayType.parse(genre)
    if play_type is PlayType.COMEDY:
        credits += _truncated_div(audience, COMEDY_EXTRA_VOLUME_FACTOR)
    elif play_type is None:
        logger.warning("No credit rule for play type %r; base credits only", genre)
    return credits
