"""Template definitions and selection of the set to render."""

from __future__ import annotations

from .models import RawAnswers, TemplateDefinition


PLUGIN_TEMPLATE = TemplateDefinition(
    key="plugin",
    filename="plugin.go",
    template="plugin.go.j2",
)

CREDENTIAL_TEMPLATE = TemplateDefinition(
    key="credential",
    filename="{{ credential_name_snake_case }}.go",
    template="credential.go.j2",
)

EXECUTABLE_TEMPLATE = TemplateDefinition(
    key="executable",
    filename="{{ executable }}.go",
    template="executable.go.j2",
)


def select_templates(raw: RawAnswers) -> tuple[TemplateDefinition, ...]:
    """Return the templates to render for *raw*, in output order.

    The plugin template is always first. The credential and executable
    templates follow only when their answer was given; ``plugin.go`` refers
    to the functions they define, so the same selection must drive every
    render in a run.
    """
    selected = [PLUGIN_TEMPLATE]
    if raw.credential_name:
        selected.append(CREDENTIAL_TEMPLATE)
    if raw.executable:
        selected.append(EXECUTABLE_TEMPLATE)
    return tuple(selected)
