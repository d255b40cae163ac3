"""Shell plugin scaffold configuration.

Typed configuration for the generator. Settings use Pydantic v2 models so
they are validated at construction time and can be read from environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


class ScaffoldConfig(BaseModel):
    """Global generator configuration.

    Instances are created once by the CLI entry point and handed to
    ``PluginGenerator``.
    """

    plugins_dir: Path = Field(
        default=Path("plugins"),
        description="Parent directory that receives one sub-directory per plugin",
    )
    template_dir: Path | None = Field(
        default=None,
        description="Override for the bundled Jinja2 template directory",
    )

    def plugin_dir(self, name: str) -> Path:
        """Return the output directory for the plugin called *name*."""
        return self.plugins_dir / name

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            PLUGIN_SCAFFOLD_PLUGINS_DIR, PLUGIN_SCAFFOLD_TEMPLATE_DIR.
        """
        template_dir = os.environ.get("PLUGIN_SCAFFOLD_TEMPLATE_DIR")
        return cls(
            plugins_dir=Path(os.environ.get("PLUGIN_SCAFFOLD_PLUGINS_DIR", "plugins")),
            template_dir=Path(template_dir) if template_dir else None,
        )
