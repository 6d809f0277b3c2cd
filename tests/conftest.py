"""Shared pytest fixtures for the phpmake test suite.

Provides reusable fixtures for:
- A scaffold configuration rooted in a temporary directory
- A ready-made ``Scaffolder``
- A user template directory for override tests
"""

from __future__ import annotations

from pathlib import Path

import pytest

from phpmake.config import ScaffoldConfig
from phpmake.scaffolder import Scaffolder


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty directory standing in for a PHP application root."""
    root = tmp_path / "laravel-app"
    root.mkdir()
    yield root


@pytest.fixture
def scaffold_config(project_dir: Path) -> ScaffoldConfig:
    """Stock configuration writing under ``project_dir``."""
    return ScaffoldConfig(base_dir=project_dir)


@pytest.fixture
def scaffolder(scaffold_config: ScaffoldConfig) -> Scaffolder:
    return Scaffolder(scaffold_config)


@pytest.fixture
def user_template_dir(tmp_path: Path) -> Path:
    """Template directory overriding only the model template."""
    php_dir = tmp_path / "user-templates" / "php"
    php_dir.mkdir(parents=True)
    (php_dir / "model.php.j2").write_text(
        "<?php\n// custom\nnamespace Domain\\{{ Namespace }};\n\nfinal class {{ Name }} {}\n",
        encoding="utf-8",
    )
    return php_dir.parent


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_phpmake_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer PHPMAKE_* variables out of the tests."""
    for var in (
        "PHPMAKE_BASE_DIR",
        "PHPMAKE_APP_DIR",
        "PHPMAKE_EXTENSION",
        "PHPMAKE_TEMPLATE_DIR",
    ):
        monkeypatch.delenv(var, raising=False)
