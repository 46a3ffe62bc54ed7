"""
Treatment rendering for included files

Turns an includee's raw lines into the output fragment requested by the
pragma's treatment:

    markdown  - spliced in place, its own pragmas expanded recursively
    comment   - whole file inside one <!-- ... --> comment
    pre       - whole file inside <pre> ... </pre>
    code      - file name label, then a fenced code block tagged with the
                language ("" for a generic block)

Only markdown recurses; the expansion callback it receives closes over the
shared output buffer and inclusion stack.
"""

from pathlib import Path
from typing import Callable, List

from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from ..models.inclusion import Inclusion, Treatment, TreatmentKind
from .log import LOG, WARN

# (includee path, includee lines) -> None, appending to the shared buffer
Expander = Callable[[Path, List[str]], None]


def comment(text: str) -> str:
    """Wrap text in an HTML comment line"""
    return f"<!--{text}-->\n"


def marker_begin(kind: str, label: str, source: str) -> str:
    return comment(f" >>>>>> BEGIN {kind} ({label}): SOURCE {source} ")


def marker_end(kind: str, label: str, source: str) -> str:
    return comment(f" <<<<<< END {kind} ({label}): SOURCE {source} ")


def trailingNewline_check(cited_path: str, include_lines: List[str]) -> None:
    """Warn when an includee does not end with a line terminator"""
    if not include_lines or not include_lines[-1].endswith("\n"):
        WARN(f"Included file has no trailing newline: {cited_path}")


def language_check(language: str) -> None:
    """Note code-fence tags that no known highlighter recognizes"""
    try:
        get_lexer_by_name(language)
    except ClassNotFound:
        LOG(f"No highlighter known for code fence language '{language}'", level=2)


def lines_render(
    treatment: Treatment,
    inclusion: Inclusion,
    include_lines: List[str],
    output: List[str],
    expand: Expander,
    pristine: bool = False,
    source: str = "",
) -> None:
    """
    Append the rendered includee to the output buffer.

    Args:
        treatment: Requested treatment
        inclusion: The inclusion being rendered
        include_lines: Raw includee lines, line terminators kept
        output: Shared output buffer
        expand: Recursive expansion callback, used for markdown only
        pristine: Suppress begin/end markers
        source: Includee path as shown in markers
    """
    trailingNewline_check(inclusion.cited_path, include_lines)

    if treatment.kind is TreatmentKind.MARKDOWN:
        if not pristine:
            output.append(marker_begin("INCLUDED FILE", treatment.label, source))
        expand(inclusion.resolved_path, include_lines)
        if not pristine:
            output.append(marker_end("INCLUDED FILE", treatment.label, source))

    elif treatment.kind is TreatmentKind.COMMENT:
        output.append(comment("".join(include_lines)))

    elif treatment.kind is TreatmentKind.PRE:
        output.append("<pre>\n")
        output.append("".join(include_lines))
        output.append("</pre>\n")

    else:
        if treatment.language:
            language_check(treatment.language)
        output.append(f"```{Path(inclusion.cited_path).name}```:\n")
        output.append(f"```{treatment.language}\n")
        output.extend(include_lines)
        output.append("```\n")
