"""Case mirroring for case-adjusting rules."""

from __future__ import annotations


def mirror_case(matched: str, replacement: str) -> str:
    """Re-case *replacement* to follow the case pattern of *matched*.

    - ``THREE`` -> ``FOUR`` (all caps, more than one cased character)
    - ``Three`` -> ``Four`` (leading capital)
    - anything else is returned unchanged.

    Example: ``mirror_case("Utilize", "use")`` -> ``"Use"``
    """
    cased = [c for c in matched if c.isupper() or c.islower()]
    if not cased or not replacement:
        return replacement
    if len(cased) > 1 and all(c.isupper() for c in cased):
        return replacement.upper()
    if cased[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement
