"""
Generate the directory tree and stub files for a React Native app skeleton.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, List, Sequence, Tuple

from ..config import DEFAULT_OUTPUT_ROOT, AppConfig
from ..template import PageDescriptor
from ..util import component_identifier, ensure_directory, unsafe_name_reason, write_text_file

logger = logging.getLogger(__name__)

METADATA_FILENAME = "app.json"
SUPPORTED_EXTENSIONS = ("tsx", "jsx", "js")

COMPONENT_TEMPLATE = """import React from 'react';
import {{ View, Text }} from 'react-native';

const {identifier} = () => {{
  return (
    <View>
      <Text>{label}</Text>
    </View>
  );
}};

export default {identifier};
"""

INDEX_TEMPLATE = """import React from 'react';
import { AppRegistry } from 'react-native';
import App from './App';

AppRegistry.registerComponent('App', () => App);
"""

APP_TEMPLATE = """import React from 'react';
import {{ View, Text }} from 'react-native';

const App = () => {{
  return (
    <View>
      <Text>{title}</Text>
    </View>
  );
}};

export default App;
"""


class GenerationStage(str, Enum):
    """Named stages of a generation run, in execution order."""

    STRUCTURE = "structure"
    COMPONENTS = "components"
    METADATA = "metadata"
    ENTRY_POINT = "entry-point"
    APP_COMPONENT = "app-component"


class FilesystemError(RuntimeError):
    """
    Raised when a directory or file cannot be created or written.

    Attributes:
        path: The offending path.
        stage: Stage that was running when the failure happened.
        completed_stages: Stages already applied on disk (nothing is rolled back).
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        stage: GenerationStage,
        completed_stages: Sequence[GenerationStage] = (),
    ) -> None:
        super().__init__(message)
        self.path = path
        self.stage = stage
        self.completed_stages: Tuple[GenerationStage, ...] = tuple(completed_stages)


@dataclass(frozen=True)
class ScaffoldOptions:
    """
    Knobs for a generation run.

    Attributes:
        output_root: Directory that receives `<app.name>/`.
        extension: File extension for component/index files.
        include_app_component: Also write a minimal `App` component.
    """
    output_root: Path = DEFAULT_OUTPUT_ROOT
    extension: str = "tsx"
    include_app_component: bool = False

    def __post_init__(self) -> None:
        if self.extension not in SUPPORTED_EXTENSIONS:
            raise ValueError(
                f"Unsupported extension {self.extension!r}; expected one of {', '.join(SUPPORTED_EXTENSIONS)}"
            )


@dataclass
class ScaffoldReport:
    """
    Stores what changed when scaffolding ran.

    Attributes:
        root: The output root directory.
        app_dir: The application directory (`<root>/<app.name>`).
        directories_created: Newly created folders.
        directories_existing: Folders that were already present.
        files_written: Files written (new or overwritten).
        completed_stages: Stages that finished, in order.
    """
    root: Path
    app_dir: Path
    directories_created: List[Path] = field(default_factory=list)
    directories_existing: List[Path] = field(default_factory=list)
    files_written: List[Path] = field(default_factory=list)
    completed_stages: List[GenerationStage] = field(default_factory=list)

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("App directory", str(self.app_dir))
        yield ("Directories created", str(len(self.directories_created)))
        yield ("Directories existing", str(len(self.directories_existing)))
        yield ("Files written", str(len(self.files_written)))
        yield ("Stages", ", ".join(stage.value for stage in self.completed_stages) or "none")


def resolve_app_dir(app: AppConfig, options: ScaffoldOptions) -> Path:
    """
    Return `<output_root>/<app.name>` as given (relative paths stay relative to the cwd).
    """
    return Path(options.output_root).expanduser() / app.name


def _segment(parent: Path, name: str, what: str, stage: GenerationStage, report: ScaffoldReport) -> str:
    """Return name if it is a single path segment, else refuse to write under it."""
    reason = unsafe_name_reason(name)
    if reason:
        raise FilesystemError(
            f"Refusing {what} name {name!r} under {parent}: {reason}",
            path=parent / name,
            stage=stage,
            completed_stages=report.completed_stages,
        )
    return name


def _write(target: Path, content: str, stage: GenerationStage, report: ScaffoldReport) -> None:
    try:
        write_text_file(target, content)
    except OSError as exc:
        raise FilesystemError(
            f"Unable to write {target}: {exc}",
            path=target,
            stage=stage,
            completed_stages=report.completed_stages,
        ) from exc
    report.files_written.append(target)


def _ensure(path: Path, stage: GenerationStage, report: ScaffoldReport) -> None:
    try:
        created = ensure_directory(path)
    except OSError as exc:
        raise FilesystemError(
            f"Unable to create directory {path}: {exc}",
            path=path,
            stage=stage,
            completed_stages=report.completed_stages,
        ) from exc
    if created:
        report.directories_created.append(path)
    else:
        report.directories_existing.append(path)


def render_component(name: str) -> str:
    """
    Render the stub component source for a component name.
    """
    return COMPONENT_TEMPLATE.format(identifier=component_identifier(name), label=name)


def generate_structure(app: AppConfig, pages: Sequence[PageDescriptor], app_dir: Path, report: ScaffoldReport) -> None:
    """
    Create the app directory and one directory per page.

    Existing directories are treated as success, so the stage is repeatable.
    """
    stage = GenerationStage.STRUCTURE
    _ensure(app_dir, stage, report)
    for page in pages:
        _ensure(app_dir / _segment(app_dir, page.name, "page", stage, report), stage, report)


def generate_components(
    app: AppConfig,
    pages: Sequence[PageDescriptor],
    app_dir: Path,
    report: ScaffoldReport,
    *,
    extension: str = "tsx",
) -> None:
    """
    Write one stub file per (page, component) pair into the page directory.

    Page directories are not created here; they must exist from the structure stage.
    """
    stage = GenerationStage.COMPONENTS
    for page in pages:
        page_dir = app_dir / _segment(app_dir, page.name, "page", stage, report)
        for component in page.components:
            target = page_dir / f"{_segment(page_dir, component, 'component', stage, report)}.{extension}"
            _write(target, render_component(component), stage, report)


def generate_metadata(app: AppConfig, pages: Sequence[PageDescriptor], app_dir: Path, report: ScaffoldReport) -> None:
    """
    Serialize the descriptor fields to app.json.
    """
    payload = json.dumps(app.metadata(), indent=2, ensure_ascii=False)
    _write(app_dir / METADATA_FILENAME, payload + "\n", GenerationStage.METADATA, report)


def generate_entry_point(
    app: AppConfig,
    pages: Sequence[PageDescriptor],
    app_dir: Path,
    report: ScaffoldReport,
    *,
    extension: str = "tsx",
) -> None:
    """
    Write the index stub registering the top-level `App` component.

    The `App` component it imports is not generated unless the app-component
    stage is enabled.
    """
    _write(app_dir / f"index.{extension}", INDEX_TEMPLATE, GenerationStage.ENTRY_POINT, report)


def generate_app_component(
    app: AppConfig,
    pages: Sequence[PageDescriptor],
    app_dir: Path,
    report: ScaffoldReport,
    *,
    extension: str = "tsx",
) -> None:
    """
    Write a minimal `App` component showing the app name.
    """
    _write(
        app_dir / f"App.{extension}",
        APP_TEMPLATE.format(title=app.name),
        GenerationStage.APP_COMPONENT,
        report,
    )


StageRunner = Callable[[AppConfig, Sequence[PageDescriptor], Path, ScaffoldReport], None]


def build_stages(options: ScaffoldOptions) -> List[tuple[GenerationStage, StageRunner]]:
    """
    Return the ordered (stage, runner) pairs for a run with these options.
    """
    ext = options.extension
    stages: List[tuple[GenerationStage, StageRunner]] = [
        (GenerationStage.STRUCTURE, generate_structure),
        (GenerationStage.COMPONENTS, lambda *args: generate_components(*args, extension=ext)),
        (GenerationStage.METADATA, generate_metadata),
        (GenerationStage.ENTRY_POINT, lambda *args: generate_entry_point(*args, extension=ext)),
    ]
    if options.include_app_component:
        stages.append((GenerationStage.APP_COMPONENT, lambda *args: generate_app_component(*args, extension=ext)))
    return stages


def generate_app(
    app: AppConfig,
    pages: Sequence[PageDescriptor],
    options: ScaffoldOptions | None = None,
) -> ScaffoldReport:
    """
    Run every generation stage in order: structure, components, metadata, entry point.

    The first failure aborts the run. Nothing is rolled back; the raised
    FilesystemError lists the stages already applied on disk. Re-running
    tolerates existing directories and overwrites existing files.

    Args:
        app: The application descriptor.
        pages: Parsed page descriptors.
        options: Output options; defaults to `apps/` with `.tsx` files.

    Returns:
        A ScaffoldReport detailing the actions taken.
    """
    options = options or ScaffoldOptions()
    app_dir = resolve_app_dir(app, options)
    report = ScaffoldReport(root=Path(options.output_root), app_dir=app_dir)

    for stage, runner in build_stages(options):
        logger.info("Running %s stage for %s", stage.value, app.name)
        runner(app, pages, app_dir, report)
        report.completed_stages.append(stage)

    logger.info(
        "Generated %s: %d page(s), %d file(s)",
        app_dir,
        len(pages),
        len(report.files_written),
    )
    return report
