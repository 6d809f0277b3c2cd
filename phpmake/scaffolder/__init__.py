"""phpmake scaffolder -- creates one PHP artifact set per request.

Quick usage::

    from phpmake.config import ScaffoldConfig
    from phpmake.scaffolder import GenerationRequest, Scaffolder

    scaffolder = Scaffolder(ScaffoldConfig(base_dir=Path("/srv/app")))
    report = scaffolder.generate(GenerationRequest(file_name="Item", father_path="Order"))
    for outcome in report.files:
        print(outcome.status, outcome.path)
"""

from phpmake.scaffolder.generator import (
    ArtifactFailure,
    DirectoryCreationFailure,
    DirectoryOutcome,
    FileCreationFailure,
    FileOutcome,
    FileStatus,
    GenerationRequest,
    MissingArgumentError,
    ScaffoldError,
    ScaffoldReport,
    Scaffolder,
    TemplateParseFailure,
    TemplateRenderFailure,
)
from phpmake.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArtifactFailure",
    "DirectoryCreationFailure",
    "DirectoryOutcome",
    "FileCreationFailure",
    "FileOutcome",
    "FileStatus",
    "GenerationRequest",
    "MissingArgumentError",
    "ScaffoldError",
    "ScaffoldReport",
    "Scaffolder",
    "TemplateParseFailure",
    "TemplateRenderFailure",
    "TemplateRenderer",
]
