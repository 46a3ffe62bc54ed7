"""
Inclusion engine

Expands include pragmas in a markdown template into a single merged
document. Expansion is a depth-first walk over the inclusion graph rooted at
the template:

1. Scanning: each line is either passed through or recognized as a pragma
2. Resolving: the cited path is resolved against the includer's directory
3. Guarding: markdown inclusions are checked for cycles and pushed
4. Rendering: the includee is rendered per treatment, recursing for markdown

The output buffer and the inclusion stack are owned by the top-level call
and passed explicitly through the recursion. Any error at any depth aborts
the whole expansion; the output file is written once, only on success.

Example:
    >>> includer = Includer(pristine=True)
    >>> text = includer.include("README.template.md", "README.md")
"""

from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from ..config.settings import AppSettings, settings_build
from ..models.inclusion import Inclusion, InclusionStack, PragmaMatch, TreatmentKind
from ..models.errors import UnreadableInput
from .scanner import pragma_scan, treatment_parse
from .guard import inclusion_checkAndPush, inclusion_pop
from .renderer import lines_render, marker_begin, marker_end
from .paths import path_inProject
from .toc import toc_create
from .images import images_resolve
from .log import LOG, WARN

PathLike = Union[str, Path]

# (input lines, output buffer) -> None
Generator = Callable[[List[str], List[str]], None]


def file_readLines(path: PathLike) -> List[str]:
    """Read a file as lines, line terminators kept as written"""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.readlines()


def file_write(path: PathLike, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def lines_include(
    includer_path: PathLike,
    input_lines: List[str],
    output: List[str],
    stack: InclusionStack,
    settings: AppSettings,
) -> None:
    """
    Expand pragmas in a document's lines into the output buffer.

    Args:
        includer_path: Path of the document the lines came from
        input_lines: The document's lines
        output: Shared output buffer, appended to
        stack: Active markdown inclusion chain, innermost last
        settings: Active settings (pristine, root)

    Raises:
        UnreadableInput: If an includee cannot be read
        CircularInclude: If a markdown inclusion closes a cycle
    """
    for line_index, input_line in enumerate(input_lines):
        match = pragma_scan(input_line)
        if match is None:
            output.append(input_line)
            continue
        pragma_expand(
            input_line.rstrip("\r\n"),
            Path(includer_path),
            line_index + 1,
            match,
            output,
            stack,
            settings,
        )


def pragma_expand(
    description: str,
    includer_path: Path,
    includer_line: int,
    match: PragmaMatch,
    output: List[str],
    stack: InclusionStack,
    settings: AppSettings,
) -> None:
    """
    Expand one recognized pragma into the output buffer.

    Markdown inclusions stay on the stack while their subtree is expanded.
    Other treatments never recurse and are never pushed.
    """
    treatment = treatment_parse(match.treatment)
    inclusion = Inclusion(
        description=description,
        includer_path=includer_path,
        includer_line=includer_line,
        cited_path=match.cited_path,
    )
    recursive = treatment.kind is TreatmentKind.MARKDOWN
    LOG(f"{includer_path.name}:{includer_line}: {treatment.label} {match.cited_path}", level=2)

    if recursive:
        inclusion_checkAndPush(stack, inclusion, settings.root)
    try:
        try:
            include_lines = file_readLines(inclusion.resolved_path)
        except (OSError, UnicodeDecodeError):
            chain = list(stack) if recursive else [*stack, inclusion]
            raise UnreadableInput(inclusion.resolved_path, chain, root=settings.root) from None

        def expand(path: Path, lines: List[str]) -> None:
            lines_include(path, lines, output, stack, settings)

        lines_render(
            treatment,
            inclusion,
            include_lines,
            output,
            expand,
            pristine=settings.pristine,
            source=path_inProject(inclusion.resolved_path, settings.root),
        )
    finally:
        if recursive:
            inclusion_pop(stack)


class Includer:
    """
    Generates merged markdown documents

    Operations:
    - include: expand include pragmas recursively
    - create_page_toc: build a table of contents from headings
    - resolve_image_urls: rewrite relative image paths as absolute URLs
    """

    def __init__(self, settings: Optional[AppSettings] = None, **options: Any) -> None:
        """
        Initialize with settings

        Args:
            settings: Prebuilt AppSettings; when given, options are ignored
            **options: Setting values (pristine, root, repo_user, repo_name)

        Raises:
            UnrecognizedOption: If an option is not a known setting
        """
        self.settings = settings if settings is not None else settings_build(**options)

    @property
    def pristine(self) -> bool:
        return self.settings.pristine

    def file_generate(
        self,
        template_path: PathLike,
        output_path: PathLike,
        operation: str,
        generate: Generator,
    ) -> str:
        """
        Read a template, generate output lines, write them in one go.

        Args:
            template_path: Input document
            output_path: Destination document
            operation: Operation name shown in the generated-file markers
            generate: Fills the output buffer from the input lines

        Returns:
            The generated text

        Raises:
            UnreadableInput: If the template cannot be read
        """
        try:
            input_lines = file_readLines(template_path)
        except (OSError, UnicodeDecodeError):
            raise UnreadableInput(Path(template_path)) from None
        LOG(f"Read {len(input_lines)} lines from {template_path}", level=2)

        source = path_inProject(template_path, self.settings.root)
        output_lines: List[str] = []
        if not self.pristine:
            output_lines.append(marker_begin("GENERATED FILE", operation, source))
        generate(input_lines, output_lines)
        if not self.pristine:
            output_lines.append(marker_end("GENERATED FILE", operation, source))

        output = "".join(output_lines)
        file_write(output_path, output)
        LOG(f"Wrote {output_path}", level=2)
        return output

    def include(self, template_path: PathLike, output_path: PathLike) -> str:
        """
        Merge included files into markdown text.

        Pragmas:
            @[ruby](foo.rb)            highlighted code block
            @[:code_block](foo.xyz)    plain code block
            @[:markdown](foo.md)       markdown, itself expanded
            @[:comment](foo.txt)       HTML comment
            @[:pre](foo.txt)           preformatted block

        Args:
            template_path: Template containing include pragmas
            output_path: Merged markdown destination

        Returns:
            The merged markdown text
        """
        def generate(input_lines: List[str], output_lines: List[str]) -> None:
            lines_include(template_path, input_lines, output_lines, [], self.settings)

        return self.file_generate(template_path, output_path, "include", generate)

    def create_page_toc(self, markdown_path: PathLike, toc_path: PathLike) -> str:
        """
        Build a page table of contents from a markdown file's headings.

        Returns:
            The TOC text
        """
        return self.file_generate(markdown_path, toc_path, "create_page_toc", toc_create)

    def resolve_image_urls(self, template_path: PathLike, output_path: PathLike) -> str:
        """
        Rewrite relative image paths as absolute URLs (deprecated).

        Returns:
            The resolved markdown text

        Raises:
            MissingRequiredConfiguration: If repo_user or repo_name is unset
                and the template has a relative image path
        """
        WARN("Method 'resolve_image_urls' is deprecated")

        def generate(input_lines: List[str], output_lines: List[str]) -> None:
            images_resolve(template_path, input_lines, output_lines, self.settings)

        return self.file_generate(template_path, output_path, "resolve", generate)

    resolve = resolve_image_urls
