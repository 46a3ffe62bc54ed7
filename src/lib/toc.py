"""
Page table of contents

Builds a nested bullet list of links from a markdown file's ATX headings.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from ..models.errors import TocHeadingsError

HEADING_REGEXP = re.compile(r'^#+ ')


@dataclass
class Heading:
    """
    A markdown ATX heading

    Attributes:
        level: Number of leading hash marks (1-6)
        title: Heading text after the hash marks
    """
    level: int
    title: str

    @classmethod
    def parse(cls, line: str) -> Optional["Heading"]:
        """
        Parse a heading line.

        Up to three leading spaces are allowed; four make it a code block.
        Levels deeper than 6 are not headings.
        """
        if line.startswith(' ' * 4):
            return None
        stripped = line.lstrip(' ')
        if not HEADING_REGEXP.match(stripped):
            return None
        parts = stripped.split(None, 1)
        hash_marks = parts[0]
        if len(hash_marks) > 6:
            return None
        title = parts[1] if len(parts) > 1 else ""
        return cls(len(hash_marks), title)

    def link(self) -> str:
        """Markdown link to the heading's anchor"""
        anchor = re.sub(r'\W+', '-', self.title).lower()
        return f"[{self.title}](#{anchor})"


def toc_create(input_lines: List[str], output_lines: List[str]) -> None:
    """
    Append one indented bullet per heading to the output buffer.

    Raises:
        TocHeadingsError: If the first heading is not level 1
    """
    level_one_seen = False
    for input_line in input_lines:
        line = input_line.rstrip('\r\n')
        heading = Heading.parse(line)
        if heading is None:
            continue
        if not level_one_seen and heading.level != 1:
            raise TocHeadingsError(line)
        level_one_seen = True
        indentation = '  ' * heading.level
        output_lines.append(f"{indentation}- {heading.link()}\n")
