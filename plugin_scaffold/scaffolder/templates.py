"""Jinja2 template rendering for plugin scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``plugin_scaffold/scaffolder/templates/`` directory and renders them against
a ``ResolvedAnswers`` snapshot.  Undefined variables are errors: a template
that refers to a field the answers do not carry fails the whole run instead
of silently rendering an empty string.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Any, Iterable

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
)

from .models import RenderedFile, ResolvedAnswers, TemplateDefinition


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class ScaffoldError(Exception):
    """Base class for errors raised while generating a plugin."""


class TemplateRenderError(ScaffoldError):
    """Raised when a filename or content template cannot be rendered."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"Template '{key}': {message}")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for plugin scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Filename templates are inline strings carried by
    each ``TemplateDefinition``; content templates are files.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Definition rendering ----------------------------------------------

    def render(self, definition: TemplateDefinition, answers: ResolvedAnswers) -> RenderedFile:
        """Render *definition* against *answers*.

        The filename is rendered first, then the contents, both from the same
        context.

        Raises:
            TemplateRenderError: On a malformed or missing template, an
                undefined variable, or a filename that is not a single plain
                path component.
        """
        context = answers.template_context()
        try:
            filename = self.render_string(definition.filename, context).strip()
            content = self.env.get_template(definition.template).render(**context)
        except TemplateError as exc:
            raise TemplateRenderError(definition.key, str(exc)) from exc

        path = PurePosixPath(filename)
        if len(path.parts) != 1 or path.name in ("", ".", ".."):
            raise TemplateRenderError(
                definition.key, f"rendered filename {filename!r} is not a plain file name"
            )
        return RenderedFile(path=path, content=content.encode("utf-8"))

    def render_all(
        self,
        definitions: Iterable[TemplateDefinition],
        answers: ResolvedAnswers,
    ) -> list[RenderedFile]:
        """Render every definition, failing on the first error.

        Nothing is returned unless all templates render, so callers never
        write a partial plugin.
        """
        return [self.render(definition, answers) for definition in definitions]

    # -- String rendering ----------------------------------------------------

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template paths.

        Paths are relative to the template root directory.
        """
        if not self.template_dir.is_dir():
            return []
        return sorted(
            str(p.relative_to(self.template_dir))
            for p in self.template_dir.rglob("*.j2")
        )
