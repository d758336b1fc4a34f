"""Template engines for the HTML adapter."""

import os
from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError

from content_adapters.exceptions import AdapterConfigurationException, TemplateRenderException
from content_adapters.protocols import TemplateEngine


class Jinja2Engine:
    """Default engine backed by Jinja2.

    The loader is rooted at the directory of ``options["filename"]`` so that
    ``{% include %}`` and ``{% extends %}`` resolve next to the template.
    Every other option is handed to ``jinja2.Environment``.
    """

    def render(self, template: str, data: Mapping[str, Any], options: Mapping[str, Any]) -> str:
        env_options = dict(options)
        filename = env_options.pop("filename", None)
        env_options.setdefault("autoescape", True)
        if filename:
            env_options.setdefault("loader", FileSystemLoader(os.path.dirname(os.path.abspath(filename))))

        try:
            env = Environment(**env_options)
        except TypeError as e:
            raise AdapterConfigurationException(
                f"Invalid Jinja2 engine configuration: {e}",
                details={"options": sorted(env_options)},
            ) from e

        try:
            context = dict(data) if isinstance(data, Mapping) else {"data": data}
            return env.from_string(template).render(**context)
        except TemplateError as e:
            raise TemplateRenderException(
                f"Failed to render template: {e}",
                details={"filename": filename, "error_type": type(e).__name__},
            ) from e


default_engine = Jinja2Engine()


def resolve_engine(engine: Any = None) -> TemplateEngine:
    """Return ``engine`` when it exposes a callable ``render``, else the default engine."""
    if engine is not None and callable(getattr(engine, "render", None)):
        return engine
    return default_engine
