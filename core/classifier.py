from __future__ import annotations

from enum import Enum


class Bucket(str, Enum):
    STRONG_LONG = "strong_long"
    MEDIUM_LONG = "medium_long"
    WEAK_LONG = "weak_long"
    MODEST_LONG = "modest_long"
    NEUTRAL = "neutral"
    MODEST_SHORT = "modest_short"
    WEAK_SHORT = "weak_short"
    MEDIUM_SHORT = "medium_short"
    STRONG_SHORT = "strong_short"


RETURN_STRONG = 50.0
RETURN_MEDIUM = 20.0
RETURN_WEAK = 10.0
RETURN_MODEST = 5.0

# (abs threshold, long bucket, short bucket), checked top-down with strict ">".
_BANDS = (
    (RETURN_STRONG, Bucket.STRONG_LONG, Bucket.STRONG_SHORT),
    (RETURN_MEDIUM, Bucket.MEDIUM_LONG, Bucket.MEDIUM_SHORT),
    (RETURN_WEAK, Bucket.WEAK_LONG, Bucket.WEAK_SHORT),
    (RETURN_MODEST, Bucket.MODEST_LONG, Bucket.MODEST_SHORT),
)

BUCKET_COLORS = {
    Bucket.STRONG_LONG: "rgb(34, 197, 94)",
    Bucket.MEDIUM_LONG: "rgb(74, 222, 128)",
    Bucket.WEAK_LONG: "rgb(134, 239, 172)",
    Bucket.MODEST_LONG: "rgb(187, 247, 208)",
    Bucket.NEUTRAL: "rgb(229, 231, 235)",
    Bucket.MODEST_SHORT: "rgb(254, 202, 202)",
    Bucket.WEAK_SHORT: "rgb(252, 165, 165)",
    Bucket.MEDIUM_SHORT: "rgb(248, 113, 113)",
    Bucket.STRONG_SHORT: "rgb(239, 68, 68)",
}

# Seven legend entries; the neutral band is sign-agnostic.
LEGEND = (
    (Bucket.STRONG_LONG, ">50% (Long)"),
    (Bucket.MEDIUM_LONG, "20-50% (Long)"),
    (Bucket.WEAK_LONG, "10-20% (Long)"),
    (Bucket.NEUTRAL, "0-10%"),
    (Bucket.WEAK_SHORT, "-10 to -20% (Short)"),
    (Bucket.MEDIUM_SHORT, "-20 to -50% (Short)"),
    (Bucket.STRONG_SHORT, "<-50% (Short)"),
)


def classify(annualized_return: float) -> Bucket:
    r = float(annualized_return)
    magnitude = abs(r)
    for threshold, long_bucket, short_bucket in _BANDS:
        if magnitude > threshold:
            return long_bucket if r > 0 else short_bucket
    return Bucket.NEUTRAL


def bucket_color(bucket: Bucket) -> str:
    return BUCKET_COLORS[bucket]


def return_color(annualized_return: float) -> str:
    return bucket_color(classify(annualized_return))


def is_highlighted(annualized_return: float) -> bool:
    return abs(float(annualized_return)) > RETURN_MEDIUM


def side(annualized_return: float) -> str:
    return "Long" if float(annualized_return) > 0 else "Short"


def legend_entries() -> list[tuple[str, str]]:
    """Return ``(color, label)`` pairs for the legend, long side first."""
    return [(bucket_color(bucket), label) for bucket, label in LEGEND]
