"""Jinja2 template rendering for PHP scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``phpmake/scaffolder/templates/`` directory (optionally shadowed by a user
template directory) for rendering with the ``Namespace`` / ``Name``
context.  The renderer only loads and compiles; callers render the returned
``Template`` themselves so a broken template is told apart from a failed
render.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    select_autoescape,
)


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for PHP scaffolding.

    Templates are looked up in *template_dir* first (when given) and then in
    the bundled template directory, so a user directory only needs to contain
    the templates it wants to replace.  Undefined variables are errors rather
    than empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        search_path = [_DEFAULT_TEMPLATE_DIR]
        if template_dir is not None:
            search_path.insert(0, Path(template_dir))
        self.search_path = search_path
        self.env = Environment(
            loader=ChoiceLoader([FileSystemLoader(str(p)) for p in search_path]),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def load(self, template_path: str) -> Template:
        """Load and compile a template.

        Raises:
            jinja2.TemplateNotFound: If no search directory holds the template.
            jinja2.TemplateSyntaxError: If the template does not parse.
        """
        return self.env.get_template(template_path)
