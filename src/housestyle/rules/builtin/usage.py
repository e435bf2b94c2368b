"""Word usage rules."""

from housestyle.rules.models import Rule

REPEATED_WORD = Rule(
    id="REPEATED_WORD",
    name="Repeated Word",
    pattern=r"\b(\w+)\s+\1\b",
    match_case=False,
    replace=r"\1",
    report="Word repeated; check whether the repetition is intended.",
    tentative=True,
)

UTILIZE = Rule(
    id="UTILIZE",
    name="Utilize",
    pattern=r"\butili[sz](e|es|ed|ing)\b",
    match_case=False,
    replace=r"us\1",
    report="Prefer 'use' to 'utilize'.",
    adjust_case=True,
)

IN_ORDER_TO = Rule(
    id="IN_ORDER_TO",
    name="In Order To",
    pattern=r"\bin order to\b",
    match_case=False,
    replace="to",
    report="'In order to' can usually be shortened to 'to'.",
    adjust_case=True,
    tentative=True,
)

ALL_USAGE_RULES = [REPEATED_WORD, UTILIZE, IN_ORDER_TO]
