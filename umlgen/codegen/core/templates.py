"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Dict, Any, List, Optional
from pathlib import Path

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    select_autoescape,
)

from .errors import GeneratorError
from .naming import format_type_name


class TemplateError(GeneratorError):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dirs: Optional[List[Path]] = None):
        """
        Initialize template engine.

        Args:
            template_dirs: Directories searched for templates, first match wins
        """
        self.template_dirs = [Path(d) for d in (template_dirs or []) if d]
        self._memory_templates: Dict[str, str] = {}
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        loaders = [DictLoader(self._memory_templates)]
        existing = [str(d) for d in self.template_dirs if d.is_dir()]
        if existing:
            loaders.append(FileSystemLoader(existing))

        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

        self._env.filters["type_name"] = format_type_name

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e

        try:
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template. It takes precedence over template files.

        Args:
            name: Template name
            content: Template content
        """
        self._memory_templates[name] = content
        if self._env.cache is not None:
            self._env.cache.clear()

    def list_templates(self) -> List[str]:
        """Names of every template reachable by this engine."""
        return sorted(set(self._env.list_templates()))


def create_template_engine(*template_dirs: Optional[Path]) -> TemplateEngine:
    """
    Create a template engine searching the given directories in order.

    Empty entries are ignored, so callers can pass an optional override first.
    """
    return TemplateEngine([d for d in template_dirs if d])
