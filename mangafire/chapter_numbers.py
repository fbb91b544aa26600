"""
Chapter number parsing for the labels shown next to each chapter link.
"""
import math
import re

from .logging import logger

DEFAULT_CHAPTER_NUMBER = 0.0

# Plain ASCII decimals only: no exponents, underscores, or non-ASCII digits
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def parse_chapter_number(text, default=DEFAULT_CHAPTER_NUMBER):
    """
    Parses a chapter-number label such as "12.5" into a float.

    Labels that are not plain numbers ("Oneshot", "", "1_0", "nan") are not an error:
    the default is returned instead, so callers always get a usable number.

    Args:
        text (str | None): The label text as displayed on the page.
        default (float): Value returned when the label cannot be parsed.

    Returns:
        float: The parsed chapter number, or `default`.
    """
    if text is None:
        return default

    cleaned = text.strip()
    if not cleaned:
        return default

    if not DECIMAL_PATTERN.fullmatch(cleaned):
        logger.trace(f"[CHAPTER NUM] Unparseable label '{cleaned}', using {default}")
        return default

    number = float(cleaned)
    if not math.isfinite(number):
        logger.trace(f"[CHAPTER NUM] Non-finite label '{cleaned}', using {default}")
        return default
    return number
