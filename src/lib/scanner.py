"""
Include pragma recognition

A pragma occupies an entire line:

    @[treatment](path)

Anything before or after the pragma on the same line disqualifies it, and
the line is passed through unchanged. Treatment labels are accepted both
bare and in the colon-qualified form (``markdown`` / ``:markdown``).

Example:
    >>> pragma_scan("@[:markdown](parts/intro.md)\\n")
    PragmaMatch(treatment=':markdown', cited_path='parts/intro.md')
    >>> pragma_scan("See @[ruby](foo.rb) for details") is None
    True
"""

import re
from typing import Optional

from ..models.inclusion import PragmaMatch, Treatment, TreatmentKind
from .log import WARN

INCLUDE_REGEXP = re.compile(r'^@\[([^\[]+)\]\(([^)]+)\)$')

# Labels naming a built-in treatment; anything else is a fence language tag
TREATMENT_LABELS = {
    'markdown': Treatment(TreatmentKind.MARKDOWN),
    'comment': Treatment(TreatmentKind.COMMENT),
    'pre': Treatment(TreatmentKind.PRE),
    'code_block': Treatment(TreatmentKind.CODE, ''),
}

DEPRECATED_LABELS = {
    'verbatim': 'markdown',
}


def pragma_scan(line: str) -> Optional[PragmaMatch]:
    """
    Recognize an include pragma on a single line.

    Args:
        line: One line of text, with or without its trailing newline

    Returns:
        PragmaMatch with the treatment label and cited path, or None if the
        line is not (entirely) a pragma
    """
    match = INCLUDE_REGEXP.match(line.rstrip('\r\n'))
    if not match:
        return None
    return PragmaMatch(treatment=match.group(1), cited_path=match.group(2))


def treatment_parse(label: str) -> Treatment:
    """
    Map a treatment label onto its Treatment.

    The deprecated ``verbatim`` spelling is accepted as ``markdown`` with a
    warning.

    Args:
        label: Treatment label as written in the pragma

    Returns:
        Treatment for the label; unknown labels become CODE with the label
        as the fence language
    """
    name = label[1:] if label.startswith(':') else label
    if name in DEPRECATED_LABELS:
        replacement = DEPRECATED_LABELS[name]
        WARN(f"Treatment ':{name}' is deprecated; please use treatment ':{replacement}'.")
        name = replacement
    if name in TREATMENT_LABELS:
        return TREATMENT_LABELS[name]
    return Treatment(TreatmentKind.CODE, label)
