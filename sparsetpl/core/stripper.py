# sparsetpl/core/stripper.py
"""
Removes insignificant indentation and line breaks from sparse template text.

Every line feed is dropped together with the indentation that follows it,
as is any whitespace at the very start of the text. Whitespace that must
reach the output has to be written as a template expression, e.g.
`{{ " " }}` or `{{ "\\n" }}`.
"""
import re

# ascii whitespace only; other unicode spaces are treated as content.
INSIGNIFICANT_WHITESPACE_RE = re.compile(r"\n?^[\t\n\f\r ]*", re.MULTILINE)

def strip_insignificant_whitespace(text: str) -> str:
    return INSIGNIFICANT_WHITESPACE_RE.sub("", text)
