"""Spacing and punctuation rules."""

from housestyle.rules.models import Rule

DOUBLE_SPACE = Rule(
    id="DOUBLE_SPACE",
    name="Multiple Spaces",
    pattern=r"(?<=\S) {2,}(?=\S)",
    replace=" ",
    report="Use a single space between words.",
)

SPACE_BEFORE_PUNCTUATION = Rule(
    id="SPACE_BEFORE_PUNCTUATION",
    name="Space Before Punctuation",
    pattern=r"(?<=\w)[ \t]+([,;:!?])",
    replace=r"\1",
    report="No space before a comma, semicolon, colon, exclamation or question mark.",
)

ELLIPSIS = Rule(
    id="ELLIPSIS",
    name="Ellipsis",
    pattern=r"(?<!\.)\.\.\.(?!\.)",
    replace="…",
    report="Use the ellipsis character instead of three full stops.",
    tentative=True,
)

ALL_TYPOGRAPHY_RULES = [DOUBLE_SPACE, SPACE_BEFORE_PUNCTUATION, ELLIPSIS]
