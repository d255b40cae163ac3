"""Main scaffolding orchestrator.

Takes ``RawAnswers`` and produces the source files of a new shell plugin:
derived fields are resolved, the template set is selected, every template is
rendered, and only then is anything written to disk.
"""

from __future__ import annotations

from pathlib import Path

from ..config import ScaffoldConfig
from .definitions import select_templates
from .emitter import emit
from .models import RawAnswers, RenderedFile
from .resolver import resolve
from .templates import TemplateRenderer


class PluginGenerator:
    """Generates the files of a shell plugin from the user's answers.

    Produces ``plugin.go`` and, depending on the answers, a credential type
    file named after the credential and an executable file named after the
    executable.
    """

    def __init__(self, config: ScaffoldConfig | None = None) -> None:
        self.config = config or ScaffoldConfig()
        self.renderer = TemplateRenderer(self.config.template_dir)

    # -- Public API --------------------------------------------------------

    def preview(self, raw: RawAnswers) -> list[RenderedFile]:
        """Render every selected template for *raw* without writing anything."""
        answers = resolve(raw)
        definitions = select_templates(raw)
        return self.renderer.render_all(definitions, answers)

    def generate(self, raw: RawAnswers) -> list[Path]:
        """Render and write the plugin described by *raw*.

        Files go to ``<plugins_dir>/<name>/``, overwriting earlier output.

        Returns:
            Paths of the written files.

        Raises:
            TemplateRenderError: If any template fails to render; nothing
                is written in that case.
            OSError: If the directory or a file cannot be written.
        """
        rendered = self.preview(raw)
        return emit(self.config.plugin_dir(raw.name), rendered)
