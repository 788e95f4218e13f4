"""
Display formatting helpers shared by the leaderboard and profile embeds.
"""

from decimal import Decimal, InvalidOperation, localcontext

from dungeon_bot.constants import ProfileConstants, UIConstants


def format_wallet_address(address: str) -> str:
    """0x1234...abcd"""
    if len(address) <= 10:
        return address
    return f"{address[:6]}...{address[-4:]}"


def short_hash(value: str) -> str:
    """Shorten a transaction hash to its first 8 and last 6 characters."""
    if not value:
        return ""
    if len(value) <= 14:
        return value
    return f"{value[:8]}…{value[-6:]}"


def format_score(score: int) -> str:
    return f"{score:,}"


def format_amount(value: str) -> str:
    """
    Format an on-chain amount string with Turkish-style grouping.

    Thousands are separated by ``.`` and at most three fractional digits are
    kept after a ``,``. Empty input counts as zero; non-numeric input is
    returned as ``NaN``.
    """
    text = str(value).strip() if value is not None else ""
    if not text:
        return "0"
    try:
        number = Decimal(text)
    except InvalidOperation:
        return "NaN"
    if not number.is_finite():
        return "NaN"

    if number != number.to_integral_value():
        with localcontext() as ctx:
            # quantize needs room for every integer digit plus the three kept decimals
            ctx.prec = max(ctx.prec, number.adjusted() + 5)
            number = number.quantize(Decimal("0.001"))
    sign = "-" if number < 0 else ""
    integral, _, fraction = f"{number.copy_abs():f}".partition(".")
    grouped = f"{int(integral):,}".replace(",", ProfileConstants.THOUSANDS_SEPARATOR)
    fraction = fraction.rstrip("0")
    return f"{sign}{grouped},{fraction}" if fraction else f"{sign}{grouped}"


def rank_label(rank: int) -> str:
    medal = UIConstants.RANK_MEDALS.get(rank)
    return f"{medal} #{rank}" if medal else f"#{rank}"


def truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[:width - 1] + "…"
