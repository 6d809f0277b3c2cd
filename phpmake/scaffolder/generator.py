"""PHP artifact scaffolding.

Takes a ``GenerationRequest`` (a file name plus an optional father path) and
a ``ScaffoldConfig``, creates the directory tree for every artifact kind and
renders one file per kind.  Existing files are never overwritten, so running
the same request twice leaves the second run with nothing to do.

Per-directory and per-file failures do not stop the run: each one is caught
and recorded in the returned ``ScaffoldReport``.  The only fatal condition is
a missing file name, raised as ``MissingArgumentError`` before anything is
written.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Any, Optional

from jinja2 import Template, TemplateError
from pydantic import BaseModel, Field, computed_field

from phpmake.config import ArtifactKind, ArtifactSpec, ScaffoldConfig

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class FileStatus(str, Enum):
    """What happened to one artifact file."""
    CREATED = "created"
    SKIPPED = "skipped"
    TEMPLATE_PARSE_FAILED = "template_parse_failed"
    TEMPLATE_RENDER_FAILED = "template_render_failed"
    FILE_CREATE_FAILED = "file_create_failed"


class ScaffoldError(Exception):
    """Base class for scaffolding errors."""


class MissingArgumentError(ScaffoldError):
    """Raised when a required argument is empty."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"missing argument: {argument}")


class DirectoryCreationFailure(ScaffoldError):
    """A directory could not be created."""


class ArtifactFailure(ScaffoldError):
    """A single artifact could not be written.  Never fatal."""

    status: FileStatus


class TemplateParseFailure(ArtifactFailure):
    """The artifact's template could not be found or compiled."""

    status = FileStatus.TEMPLATE_PARSE_FAILED


class TemplateRenderFailure(ArtifactFailure):
    """The artifact's template failed while rendering."""

    status = FileStatus.TEMPLATE_RENDER_FAILED


class FileCreationFailure(ArtifactFailure):
    """The artifact's target file could not be created or written."""

    status = FileStatus.FILE_CREATE_FAILED


# ---------------------------------------------------------------------------
# Request & report models
# ---------------------------------------------------------------------------


class GenerationRequest(BaseModel):
    """What to scaffold.

    ``file_name`` is the base name of the artifact set, ``father_path`` an
    optional parent grouping.  With a father path the files land in the
    father's directory and their names are prefixed with it: ``Item`` under
    ``Order`` becomes ``Order/OrderItem.php``.
    """

    file_name: str = Field(default="", description="Base name of the artifact set")
    father_path: str = Field(default="", description="Optional parent path / namespace prefix")

    @property
    def directory_name(self) -> str:
        """Directory segment under each artifact root."""
        return self.father_path or self.file_name

    @property
    def target_name(self) -> str:
        """File name stem before the artifact suffix and extension."""
        if self.father_path:
            return self.directory_name + self.file_name
        return self.file_name

    @property
    def namespace(self) -> str:
        """Value substituted for ``Namespace`` in templates."""
        return self.directory_name

    @property
    def name(self) -> str:
        """Value substituted for ``Name`` in templates.

        The last path segment of the bare file name, so ``Item`` stays
        ``Item`` even when a father path prefixes the file name.
        """
        return PurePosixPath(self.file_name).name or self.file_name

    def context(self) -> dict[str, Any]:
        """Template context for every artifact."""
        return {"Namespace": self.namespace, "Name": self.name}


class DirectoryOutcome(BaseModel):
    """Result of ensuring one directory exists."""

    path: Path
    created: bool = Field(default=False, description="False when it already existed or failed")
    error: Optional[str] = Field(default=None)

    @computed_field  # type: ignore[misc]
    @property
    def ok(self) -> bool:
        """True when the directory exists afterwards."""
        return self.error is None


class FileOutcome(BaseModel):
    """Result of generating one artifact."""

    kind: ArtifactKind
    path: Path
    status: FileStatus
    message: str = Field(default="")


class ScaffoldReport(BaseModel):
    """Everything one scaffolding run did, in the order it did it."""

    request: GenerationRequest
    directories: list[DirectoryOutcome] = Field(default_factory=list)
    files: list[FileOutcome] = Field(default_factory=list)

    @property
    def created(self) -> list[FileOutcome]:
        return [f for f in self.files if f.status == FileStatus.CREATED]

    @property
    def skipped(self) -> list[FileOutcome]:
        return [f for f in self.files if f.status == FileStatus.SKIPPED]

    @property
    def failed(self) -> list[FileOutcome]:
        return [
            f for f in self.files
            if f.status not in (FileStatus.CREATED, FileStatus.SKIPPED)
        ]

    @property
    def failed_directories(self) -> list[DirectoryOutcome]:
        return [d for d in self.directories if not d.ok]

    @computed_field  # type: ignore[misc]
    @property
    def ok(self) -> bool:
        """True when no directory or file failed.  Skips are not failures."""
        return not self.failed and not self.failed_directories


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


class Scaffolder:
    """Creates the directories and files of one PHP artifact set.

    The run is strictly sequential: all directories first, then the
    artifacts in table order.
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.renderer = renderer or TemplateRenderer(self.config.template_dir)

    # -- Public API --------------------------------------------------------

    def generate(self, request: GenerationRequest) -> ScaffoldReport:
        """Scaffold every artifact for *request*.

        Raises:
            MissingArgumentError: If ``request.file_name`` is empty.  Nothing
                is written in that case.

        Returns:
            A ``ScaffoldReport`` listing every directory and file outcome.
        """
        if not request.file_name:
            raise MissingArgumentError("--file")

        report = ScaffoldReport(request=request)

        for directory in self.plan_directories(request):
            report.directories.append(self._ensure_directory(directory))

        context = request.context()
        for artifact, path in self.plan_files(request):
            report.files.append(self._write_artifact(artifact, path, context))

        return report

    def plan_directories(self, request: GenerationRequest) -> list[Path]:
        """Directories to create, parents before children."""
        roots = self.config.artifact_roots
        directories = [self.config.app_path, *roots]
        directories.extend(root / _relative(request.directory_name) for root in roots)
        return directories

    def plan_files(self, request: GenerationRequest) -> list[tuple[ArtifactSpec, Path]]:
        """``(artifact, target path)`` pairs in generation order."""
        planned: list[tuple[ArtifactSpec, Path]] = []
        roots = self.config.artifact_roots
        for artifact, root in zip(self.config.artifacts, roots):
            filename = f"{request.target_name}{artifact.suffix}{self.config.extension}"
            path = root / _relative(request.directory_name) / _relative(filename)
            planned.append((artifact, path))
        return planned

    # -- Directories -------------------------------------------------------

    def _ensure_directory(self, directory: Path) -> DirectoryOutcome:
        existed = directory.is_dir()
        try:
            _mkdir(directory)
        except DirectoryCreationFailure as exc:
            return DirectoryOutcome(path=directory, error=str(exc))
        return DirectoryOutcome(path=directory, created=not existed)

    # -- Files -------------------------------------------------------------

    def _write_artifact(
        self, artifact: ArtifactSpec, path: Path, context: dict[str, Any]
    ) -> FileOutcome:
        try:
            template = self._load_template(artifact)

            if path.exists():
                return FileOutcome(
                    kind=artifact.kind,
                    path=path,
                    status=FileStatus.SKIPPED,
                    message="already exists, skipping...",
                )

            try:
                content = template.render(**context)
            except TemplateError as exc:
                raise TemplateRenderFailure(f"Error executing template: {exc}") from exc

            _create_file(path, content)
        except ArtifactFailure as exc:
            return FileOutcome(
                kind=artifact.kind, path=path, status=exc.status, message=str(exc)
            )

        return FileOutcome(kind=artifact.kind, path=path, status=FileStatus.CREATED)

    def _load_template(self, artifact: ArtifactSpec) -> Template:
        try:
            return self.renderer.load(artifact.template)
        except TemplateError as exc:
            raise TemplateParseFailure(
                f"Error parsing template {artifact.template}: {exc}"
            ) from exc


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _relative(segment: str) -> str:
    """Keep user-supplied segments inside the artifact root."""
    return segment.lstrip("/")


def _mkdir(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationFailure(f"Error creating directory {directory}: {exc}") from exc


def _create_file(path: Path, content: str) -> None:
    """Write *content* to a new file.  Never overwrites, never creates parents."""
    try:
        with path.open("x", encoding="utf-8") as handle:
            handle.write(content)
    except OSError as exc:
        raise FileCreationFailure(f"Error creating file {path}: {exc}") from exc
