"""A minimal template engine with variables and one-level block inheritance."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

BLOCK_START = "{% block content %}"
BLOCK_END = "{% endblock %}"


class TemplateNotFoundError(LookupError):
    """Raised when a template name is not registered."""


@dataclass
class Template:
    """A named template, optionally extending a parent template."""

    name: str
    content: str
    parent: str | None = None


def replace_variables(template: str, context: Mapping[str, str]) -> str:
    """Substitute every ``{{ key }}`` placeholder with its value from *context*."""
    result = template
    for key, value in context.items():
        variable = f"{{{{ {key} }}}}"
        if variable in value:
            raise ValueError(f"value for {key!r} contains its own placeholder")
        while variable in result:
            result = result.replace(variable, value, 1)
    return result


class TemplateRegistry:
    """Holds templates by name and renders them."""

    def __init__(self) -> None:
        self._templates: dict[str, Template] = {}

    def register(self, name: str, content: str, parent: str | None = None) -> Template:
        """Register a template, replacing any earlier one of the same name."""
        template = Template(name, content, parent)
        self._templates[name] = template
        return template

    def find(self, name: str) -> Template | None:
        """Return the template called *name*, or ``None``."""
        return self._templates.get(name)

    def render(self, name: str, context: Mapping[str, str] | None = None) -> str:
        """Render a template, placing it into its parent's content block."""
        context = context or {}
        template = self.find(name)
        if template is None:
            raise TemplateNotFoundError(name)
        content = replace_variables(template.content, context)
        if template.parent is None:
            return content
        parent = self.find(template.parent)
        if parent is None:
            return content
        start = parent.content.find(BLOCK_START)
        if start == -1:
            return content
        end = parent.content.find(BLOCK_END, start)
        if end == -1:
            return content
        merged = parent.content[:start] + content + parent.content[end + len(BLOCK_END):]
        return replace_variables(merged, context)