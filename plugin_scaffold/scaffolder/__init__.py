"""Shell plugin scaffolder -- generates the source files of a new plugin.

This module takes the answers describing a plugin (``RawAnswers``), derives
identifier forms from them, analyses an example credential, and renders the
plugin, credential type and executable templates into a plugin directory.

Quick usage::

    from plugin_scaffold.scaffolder import PluginGenerator, RawAnswers

    answers = RawAnswers(
        name="acme",
        platform_name="Acme Cloud",
        executable="acme",
        credential_name="Access Token",
        example_credential="acme_4f9c2d7e1b3a5c8d9e0f",
    )
    written = PluginGenerator().generate(answers)
"""

from plugin_scaffold.scaffolder.composition import analyze, detect_prefix
from plugin_scaffold.scaffolder.definitions import select_templates
from plugin_scaffold.scaffolder.emitter import emit
from plugin_scaffold.scaffolder.generator import PluginGenerator
from plugin_scaffold.scaffolder.models import (
    Charset,
    RawAnswers,
    RenderedFile,
    ResolvedAnswers,
    TemplateDefinition,
    ValueComposition,
)
from plugin_scaffold.scaffolder.resolver import resolve
from plugin_scaffold.scaffolder.templates import (
    ScaffoldError,
    TemplateRenderError,
    TemplateRenderer,
)

__all__ = [
    "Charset",
    "PluginGenerator",
    "RawAnswers",
    "RenderedFile",
    "ResolvedAnswers",
    "ScaffoldError",
    "TemplateDefinition",
    "TemplateRenderError",
    "TemplateRenderer",
    "ValueComposition",
    "analyze",
    "detect_prefix",
    "emit",
    "resolve",
    "select_templates",
]
