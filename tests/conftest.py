"""Shared test fixtures — sample texts, configs, rule files."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_text_clean() -> str:
    """A text with no house-style issues."""
    return "The committee will use the new process to publish the report.\n"


@pytest.fixture
def sample_text_messy() -> str:
    """A text that trips several built-in rules."""
    return textwrap.dedent("""\
        We will Utilize the  new process in order to publish the the report.
        Is it ready ? Wait...
    """)


@pytest.fixture
def custom_rules_yaml() -> str:
    return textwrap.dedent("""\
        - id: THREE_FOUR
          pattern: three
          match_case: false
          replace: four
          report: Count to four.
        - id: EMAIL_AT
          pattern: '(\\w+)@(\\w+)'
          replace: '\\2 at \\1'
          tentative: true
    """)


@pytest.fixture
def tmp_project(tmp_path: Path, monkeypatch) -> Path:
    """An empty working directory for CLI tests."""
    monkeypatch.chdir(tmp_path)
    for var in (
        "HOUSESTYLE_FORMAT",
        "HOUSESTYLE_CONTEXT",
        "HOUSESTYLE_DISABLE_RULES",
        "HOUSESTYLE_NO_TENTATIVE",
    ):
        monkeypatch.delenv(var, raising=False)
    return tmp_path
