"""phpmake configuration.

Centralised, typed configuration for the scaffolder. The directory roots, the
file extension and the ordered artifact table are Pydantic v2 models so they
can be validated at construction time, injected into ``Scaffolder`` (tests
point ``base_dir`` at a temporary directory) and loaded from JSON or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Artifact table
# ---------------------------------------------------------------------------


class ArtifactKind(str, Enum):
    """Category of generated file."""
    MODEL = "model"
    VALIDATOR = "validator"
    STORE = "store"
    PRESENTER = "presenter"
    CONTROLLER = "controller"


class ArtifactSpec(BaseModel):
    """One generated file: where it goes, how it is named, what it renders."""

    kind: ArtifactKind = Field(..., description="Artifact category")
    root: str = Field(..., min_length=1, description="Root directory relative to the app dir")
    suffix: str = Field(default="", description="Appended to the file name before the extension")
    template: str = Field(..., min_length=1, description="Template path relative to the template dir")


def default_artifacts() -> list[ArtifactSpec]:
    """Return the five stock artifacts in generation order."""
    return [
        ArtifactSpec(kind=ArtifactKind.MODEL, root="Models", template="php/model.php.j2"),
        ArtifactSpec(
            kind=ArtifactKind.VALIDATOR,
            root="Validators",
            suffix="Validator",
            template="php/validator.php.j2",
        ),
        ArtifactSpec(kind=ArtifactKind.STORE, root="Store", template="php/store.php.j2"),
        ArtifactSpec(
            kind=ArtifactKind.PRESENTER,
            root="Presenters",
            suffix="Presenter",
            template="php/presenter.php.j2",
        ),
        ArtifactSpec(
            kind=ArtifactKind.CONTROLLER,
            root="Http/Controllers",
            suffix="Controller",
            template="php/controller.php.j2",
        ),
    ]


# ---------------------------------------------------------------------------
# Top-level configuration
# ---------------------------------------------------------------------------


class ScaffoldConfig(BaseModel):
    """Global phpmake configuration.

    Instances are typically created once by the CLI entry point (from the
    environment or a JSON file) and then handed to ``Scaffolder``.
    """

    base_dir: Path = Field(default=Path("."))
    app_dir: str = Field(default="app", min_length=1)
    extension: str = Field(default=".php", pattern=r"^\.[A-Za-z0-9]+$")
    template_dir: Optional[Path] = Field(
        default=None, description="Directory whose templates override the bundled ones"
    )
    artifacts: list[ArtifactSpec] = Field(default_factory=default_artifacts, min_length=1)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def app_path(self) -> Path:
        """Root of the generated application tree."""
        return self.base_dir / self.app_dir

    @property
    def artifact_roots(self) -> list[Path]:
        """Root directory of every artifact, in table order."""
        return [self.app_path / artifact.root for artifact in self.artifacts]

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON.

        Raises:
            OSError: If the file cannot be read.
            pydantic.ValidationError: If the content is not a valid config.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            PHPMAKE_BASE_DIR, PHPMAKE_APP_DIR, PHPMAKE_EXTENSION,
            PHPMAKE_TEMPLATE_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("PHPMAKE_BASE_DIR"):
            kwargs["base_dir"] = Path(os.environ["PHPMAKE_BASE_DIR"])
        if os.environ.get("PHPMAKE_APP_DIR"):
            kwargs["app_dir"] = os.environ["PHPMAKE_APP_DIR"]
        if os.environ.get("PHPMAKE_EXTENSION"):
            kwargs["extension"] = os.environ["PHPMAKE_EXTENSION"]
        if os.environ.get("PHPMAKE_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["PHPMAKE_TEMPLATE_DIR"])
        return cls(**kwargs)
