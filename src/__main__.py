#!/usr/bin/env python3
"""
mdinclude - Markdown include-pragma expander

Assembles a markdown document from a template by expanding full-line
include pragmas, recursively, into a single merged file.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Pragmas (one per line, nothing else on the line):
    @[:markdown](part.md)      splice markdown, expanding its own pragmas
    @[ruby](example.rb)        fenced code block tagged "ruby"
    @[:code_block](data.xyz)   fenced code block without a language
    @[:comment](notes.txt)     HTML comment
    @[:pre](output.txt)        preformatted block

Usage:
    mdinclude inputdir/ outputdir/ --inputFile README.template.md --outputFile README.md

Examples:
    # Merge includes, marking each generated section
    mdinclude docs/ . --inputFile README.template.md --outputFile README.md

    # Merge includes without any generated markers
    mdinclude docs/ . --inputFile README.template.md --outputFile README.md --pristine

    # Build a page table of contents
    mdinclude . . --inputFile README.md --outputFile toc.md --operation toc
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import Includer, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline, MarkdownIncludeError


DISPLAY_TITLE = r"""
                  _ _            _           _
  _ __ ___   __| (_)_ __   ___| |_   _  __| | ___
 | '_ ` _ \ / _` | | '_ \ / __| | | | |/ _` |/ _ \
 | | | | | | (_| | | | | | (__| | |_| | (_| |  __/
 |_| |_| |_|\__,_|_|_| |_|\___|_|\__,_|\__,_|\___|

  Markdown include-pragma expander
"""

OPERATIONS = ("include", "toc", "resolve")

# Define CLI arguments
parser = ArgumentParser(
    description="mdinclude - Expand include pragmas into a single merged markdown document",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Template markdown file (relative to inputdir)"
)

parser.add_argument(
    "--outputFile", required=True, type=str, help="Generated markdown file (relative to outputdir)"
)

parser.add_argument(
    "--operation",
    default="include",
    choices=OPERATIONS,
    help="Generation to perform: merge includes, build a page TOC, or resolve image URLs",
)

parser.add_argument(
    "--pristine",
    default=False,
    action="store_true",
    help="Suppress generated begin/end marker comments",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the template
            - outputTargetFile: Resolved path to the generated document
            - envOK: True if environment is valid

    Exits:
        1 if the template does not exist
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.outputTargetFile = state.outputdir / state.outputFile
    state.outputTargetFile.parent.mkdir(parents=True, exist_ok=True)
    LOG(f"Output file: {state.outputTargetFile}", level=2)

    state.envOK = True
    return state


def document_generate(inputstate: ProgramState) -> ProgramState:
    """
    Run the requested operation over the template.

    Paths in markers and backtraces are shown relative to inputdir.

    Args:
        inputstate: Program state with resolved input and output paths

    Returns:
        ProgramState with added field:
            - generateResult: Dict containing:
                - status: bool
                - output_file: str
                - line_count: int

    Exits:
        1 if generation fails (missing includee, circular include, ...)
    """

    state = inputstate.copy()

    LOG(f"Running '{state.operation}' on {state.inputSourceFile.name}...", level=1)

    try:
        includer = Includer(pristine=state.pristine, root=state.inputdir)
        generate = {
            "include": includer.include,
            "toc": includer.create_page_toc,
            "resolve": includer.resolve_image_urls,
        }[state.operation]
        text = generate(state.inputSourceFile, state.outputTargetFile)
    except MarkdownIncludeError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    state.generateResult = {
        "status": True,
        "output_file": str(state.outputTargetFile),
        "line_count": len(text.splitlines()),
    }
    LOG(f"Generated {state.generateResult['line_count']} lines", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display generation results to the user.

    Args:
        inputstate: Program state with generateResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if generateResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.generateResult:
        print("Error: Generation failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Generation successful!", level=1)
    LOG(f"  Output: {state.generateResult['output_file']}", level=1)
    LOG(f"  Lines:  {state.generateResult['line_count']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="mdinclude - Markdown include-pragma expander",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - generate a markdown document from a template.

    Orchestrates the pipeline:
        1. env_check: Validate paths
        2. document_generate: Expand includes / build TOC / resolve images
        3. results_report: Display results

    Args:
        options: CLI arguments from argparse
            - inputFile: str - Template filename
            - outputFile: str - Generated filename
            - operation: str - include, toc or resolve
            - pristine: bool - Suppress generated markers
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing the template
        outputdir: Directory where the generated document is written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, document_generate, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
