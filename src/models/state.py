"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from functools import reduce
from typing import Optional, Type, TypeVar, List, Callable
from dataclasses import dataclass, field, fields

from .page import RenderResult


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the page pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the build progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, pageTitle, theme,
          navItem, script, copyright, outputFile
        - env_check: inputSourceFile, scriptSources, htmlOutputdir, envOK
        - page_build: renderResult
        - page_write: outputPath
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the source .md file
        outputdir: Base output directory for the compiled page
        verbosity: Logging verbosity level (1-3)
        inputFile: Input .md filename (relative to inputdir)
        pageTitle: Site title shown in the header (None: settings default)
        theme: Theme name (None: settings default)
        navItem: Navigation entries as [url, title] pairs
        script: Custom JavaScript files (relative to inputdir)
        copyright: Footer copyright text
        outputFile: Output filename (None: settings default)
        envOK: Environment validation passed
        inputSourceFile: Path to the input .md file
        scriptSources: Contents of the custom JavaScript files
        htmlOutputdir: Directory the page is written to
        renderResult: Rendered page or error page
        outputPath: Path of the written HTML file
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    pageTitle: Optional[str] = field(default=None)
    theme: Optional[str] = field(default=None)
    navItem: Optional[List[List[str]]] = field(default=None)
    script: Optional[List[str]] = field(default=None)
    copyright: str = field(default="")
    outputFile: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    scriptSources: List[str] = field(default_factory=list)
    htmlOutputdir: Path = field(default=Path("/"))
    renderResult: Optional[RenderResult] = field(default=None)
    outputPath: Optional[Path] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, theme, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for build output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        valid_fields = {f.name for f in fields(cls)}

        # Only keep options that exist in ProgramState
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            page_build,
            page_write,
            results_report
        )

    This is equivalent to:
        results_report(page_write(page_build(env_check(initial_state))))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
