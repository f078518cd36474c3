#!/usr/bin/env python3
"""
pagedown - Markdown to themed HTML page compiler

Compiles a markdown file into a single self-contained HTML page: themed
header, navigation menu, the rendered markdown as content, and a footer.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Supported markdown:
    - Headers: "# ", "## ", "### " and === / --- underlines
    - Unordered lists: "* item"
    - **bold**, *italic*, [text](url)
    - Paragraphs separated by blank lines

Usage:
    pagedown inputdir/ outputdir/ --inputFile about.md

    The page is written to outputdir/ as index.html (or --outputFile).
    If the markdown cannot be loaded, the generic error page is written
    instead and the exit status is 1.

Examples:
    # Basic build
    pagedown . output/ --inputFile README.md

    # Themed page with navigation and a footer credit
    pagedown docs/ site/ --inputFile about.md --theme teal \\
        --navItem / Home --navItem /about.html About --copyright "ACME Corp"

    # Verbose output
    pagedown . output/ --inputFile notes.md -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import site_build, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
                              _
  _ __   __ _  __ _  ___  __| | _____      ___ __
 | '_ \ / _` |/ _` |/ _ \/ _` |/ _ \ \ /\ / / '_ \
 | |_) | (_| | (_| |  __/ (_| | (_) \ V  V /| | | |
 | .__/ \__,_|\__, |\___|\__,_|\___/ \_/\_/ |_| |_|
 |_|          |___/

  Markdown to themed HTML page compiler
"""

# Define CLI arguments
parser = ArgumentParser(
    description="pagedown - Markdown to themed HTML page compiler",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input markdown (.md) file (relative to inputdir)"
)

parser.add_argument(
    "--pageTitle",
    default=None,
    type=str,
    help="Site title shown in the page header. Defaults to PAGEDOWN_SITE_TITLE",
)

parser.add_argument(
    "--theme",
    default=None,
    type=str,
    help="Theme name (e.g. blue, teal, deepPurple). Defaults to PAGEDOWN_DEFAULT_THEME",
)

parser.add_argument(
    "--navItem",
    action="append",
    nargs=2,
    metavar=("URL", "TITLE"),
    default=None,
    help="Navigation menu entry (repeatable)",
)

parser.add_argument(
    "--script",
    action="append",
    default=None,
    type=str,
    help="JavaScript file embedded in the page footer, relative to inputdir (repeatable)",
)

parser.add_argument("--copyright", default="", type=str, help="Footer copyright text")

parser.add_argument(
    "--outputFile",
    default=None,
    type=str,
    help="Output filename within outputdir. Defaults to PAGEDOWN_OUTPUT_FILENAME",
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
    Validate environment and resolve all file paths.

    The markdown file itself is not checked here: a missing or undecodable
    source is reported by the loader as an error page.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Path to the .md input file
            - scriptSources: Contents of the --script files
            - htmlOutputdir: Created output directory path
            - envOK: True if environment is valid

    Exits:
        1 if a --script file cannot be read
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    state.inputSourceFile = state.inputdir / state.inputFile
    LOG(f"Input file: {state.inputSourceFile}", level=2)

    state.scriptSources = []
    for script in state.script or []:
        script_file = state.inputdir / script
        try:
            state.scriptSources.append(script_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: Cannot read script {script_file}: {e}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
        LOG(f"Script: {script_file}", level=2)

    state.htmlOutputdir = state.outputdir
    state.htmlOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.htmlOutputdir}", level=2)

    state.envOK = True
    return state


def page_build(inputstate: ProgramState) -> ProgramState:
    """
    Render the markdown source into a complete themed page.

    Args:
        inputstate: Program state with inputSourceFile resolved

    Returns:
        ProgramState with added field:
            - renderResult: RenderResult (page, or error page on failure)
    """

    state = inputstate.copy()

    LOG("Building page...", level=1)

    state.renderResult = site_build(
        page_title=state.pageTitle,
        theme=state.theme,
        nav_items=[(url, title) for url, title in state.navItem or []],
        scripts=state.scriptSources,
        markdown_path=state.inputSourceFile,
        copyright=state.copyright,
    )
    LOG(f"Render status: {state.renderResult.status}", level=2)
    return state


def page_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the rendered page (or error page) to the output directory.

    Returns:
        ProgramState with added field:
            - outputPath: Path of the written HTML file

    Exits:
        1 if renderResult is None
    """

    state = inputstate.copy()

    if state.renderResult is None:
        print("Error: No rendered page available", file=sys.stderr)
        sys.exit(1)

    state.outputPath = state.htmlOutputdir / (state.outputFile or appsettings.output_filename)
    state.outputPath.write_text(state.renderResult.html, encoding="utf-8")
    LOG(f"Wrote {state.outputPath}", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display build results to the user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if the page could not be rendered (error page was written)
    """
    state: ProgramState = inputstate.copy()
    if not state.renderResult or not state.renderResult.ok:
        print(f"Error: Page build failed, error page written to {state.outputPath}", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Page built successfully!", level=1)
    LOG(f"  Output: {state.outputPath}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="pagedown - Markdown to themed HTML page compiler",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - compile a markdown file to a themed HTML page.

    Orchestrates the pipeline:
        1. env_check: Resolve paths, read scripts, create output directory
        2. page_build: Load markdown and render the page
        3. page_write: Write the page (or error page) to disk
        4. results_report: Report outcome, exit 1 on failure

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, page_build, page_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
