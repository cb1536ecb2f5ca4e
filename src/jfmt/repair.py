"""
Best-effort textual repair of common JSON mistakes.

This is a regex patch, not a parser. Apostrophes inside otherwise valid
double-quoted strings can be rewritten too.
"""

import re

from loguru import logger

TRAILING_COMMA = re.compile(r",(\s*[}\]])")
SINGLE_QUOTED_KEY = re.compile(r"'([^']*)'(\s*:)")
SINGLE_QUOTED_VALUE = re.compile(r":\s*'([^']*)'")


def repair_json(text: str) -> str:
    """
    Strip trailing commas and rewrite single-quoted keys and values.

    Args:
        text: Raw JSON-ish text

    Returns:
        Patched text, to be handed to a strict decoder
    """
    text, count = TRAILING_COMMA.subn(r"\1", text)
    if count:
        logger.debug(f"Removed {count} trailing comma(s)")

    text, count = SINGLE_QUOTED_KEY.subn(r'"\1"\2', text)
    if count:
        logger.debug(f"Rewrote {count} single-quoted key(s)")

    text, count = SINGLE_QUOTED_VALUE.subn(r': "\1"', text)
    if count:
        logger.debug(f"Rewrote {count} single-quoted value(s)")

    return text
