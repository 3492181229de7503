"""
Utility functions for picking a language code out of a request.
"""
import math
import re
from typing import List, NamedTuple, Optional

# Weight applied to tags that carry no q-value, or one that is not a number
DEFAULT_WEIGHT = 1.0

_Q_VALUE_RE = re.compile(r"^\s*q\s*=\s*(.*?)\s*$", re.IGNORECASE)


class NegotiatedLanguage(NamedTuple):
    """A language tag offered in an Accept-Language header."""
    code: str
    weight: float


def _parse_weight(segment: Optional[str]) -> float:
    if segment is None:
        return DEFAULT_WEIGHT
    match = _Q_VALUE_RE.match(segment)
    if not match:
        return DEFAULT_WEIGHT
    try:
        weight = float(match.group(1))
    except ValueError:
        return DEFAULT_WEIGHT
    # NaN never orders against other weights
    return DEFAULT_WEIGHT if math.isnan(weight) else weight


def parse_accept_language(accept_language: Optional[str]) -> List[NegotiatedLanguage]:
    """
    Parse an Accept-Language header into weighted tags, highest weight first.

    Example header: "zh-CN,zh;q=0.9,en;q=0.8,en-GB;q=0.7,en-US;q=0.6"

    Tags without a q-value weigh 1.0. The sort is stable, so tags with equal
    weights keep the order in which the client listed them.

    Args:
        accept_language: Raw header value (may be None or empty)

    Returns:
        List of NegotiatedLanguage, sorted by weight descending
    """
    if not accept_language:
        return []

    languages = []
    for entry in accept_language.split(","):
        segments = entry.split(";")
        code = segments[0].strip()
        if not code:
            continue
        weight = _parse_weight(segments[1] if len(segments) > 1 else None)
        languages.append(NegotiatedLanguage(code=code, weight=weight))

    return sorted(languages, key=lambda lang: lang.weight, reverse=True)


def select_preferred_language(accept_language: Optional[str]) -> Optional[str]:
    """Return the highest-weighted tag of the header, or None if it offers none."""
    languages = parse_accept_language(accept_language)
    return languages[0].code if languages else None


def normalize_language_code(code: str) -> str:
    """
    Drop any weight suffix and surrounding whitespace.

    Casing is kept as received: 'zh-CN', 'en-us' and 'zh' are returned unchanged.
    """
    return code.split(";")[0].strip()


def negotiate_language_code(
    language_code: Optional[str],
    accept_language: Optional[str]
) -> Optional[str]:
    """
    Pick the language code for a request.

    An explicit language code wins and the header is not consulted at all.
    Otherwise the highest-weighted Accept-Language tag is used.

    Returns:
        Normalized language code, or None when neither source provides one
    """
    if language_code:
        normalized = normalize_language_code(language_code)
        if normalized:
            return normalized

    preferred = select_preferred_language(accept_language)
    if preferred is None:
        return None
    return normalize_language_code(preferred) or None
