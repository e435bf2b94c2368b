"""Starter .housestyle.toml template."""

DEFAULT_TOML = """\
# housestyle configuration
version = "1.0"

[check]
context_window = 30       # characters shown either side of a match (0 = none)
include_tentative = true  # report advisory (tentative) rules too
fail_on_findings = true   # exit 1 when definite findings exist

[output]
format = "terminal"       # terminal | json
show_summary = true

[rules]
builtin = true
directory = ".housestyle-rules"   # *.yaml rule files
# enable = ["DOUBLE_SPACE", "UTILIZE"]   # empty = all enabled
# disable = ["ELLIPSIS"]
"""
