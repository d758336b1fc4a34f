"""Adapter that renders HTML from template files."""

import asyncio
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from content_adapters.adapters.json_adapter import JSONAdapter, pick_formatter
from content_adapters.exceptions import AdapterConfigurationException, ErrorCode, TemplateNotFoundException
from content_adapters.logging_config import get_logger, log_with_context
from content_adapters.models.envelope import error_message
from content_adapters.protocols import TemplateEngine
from content_adapters.utils.callbacks import maybe_await
from content_adapters.views.engines import resolve_engine
from content_adapters.views.resolver import (
    build_view_candidates,
    find_valid_view_from_paths,
    normalize_fileext,
    with_fileext,
)

logger = get_logger(__name__)

ERROR_PAGE_TITLE = "Not Found"


class HTMLAdapter(JSONAdapter):
    """Renders templates found through an ordered lookup of view directories.

    The template is searched for in the explicit ``dirname`` directories, the
    theme views folder, the extension views folder and the application views
    folder, in that order. When none holds it, ``viewname`` itself is read.

    Args:
        engine: Object exposing ``render(template, data, options)``; Jinja2 when omitted
        engine_configuration: Default options passed to the engine on every render
        extname: Extension whose views folder is searched
        themename: Theme whose views folder is searched
        viewname: Default template name
        fileext: Template file extension
        dirname: Default explicit lookup directory or directories
    """

    media_type = "text/html"
    supports_jsonp = False

    def __init__(
        self,
        engine: TemplateEngine | None = None,
        engine_configuration: Mapping[str, Any] | None = None,
        extname: str | None = None,
        themename: str | None = None,
        viewname: str | None = None,
        fileext: str | None = None,
        dirname: str | Sequence[str] | None = None,
        **options: Any,
    ):
        super().__init__(**options)
        self.engine = resolve_engine(engine)
        self.engine_configuration = engine_configuration
        self.extname = extname
        self.themename = themename or self.settings.default_themename
        self.viewname = viewname
        self.fileext = normalize_fileext(fileext) if fileext else self.settings.default_fileext
        self.dirname = dirname

    def format_success(self, data: Any, **options: Any) -> Any:
        raise AdapterConfigurationException("HTML rendering reads template files, use 'await adapter.render(...)'")

    def format_failure(self, err: Any, **options: Any) -> Any:
        raise AdapterConfigurationException("HTML rendering reads template files, use 'await adapter.error(...)'")

    async def _render_payload(self, data: Any, **options: Any) -> Any:
        formatter = pick_formatter(options.get("format_render"), self.format_render)
        if formatter is not None:
            return await maybe_await(formatter(data, options))
        return await self.render_template(data, **options)

    async def _error_payload(self, err: Any, **options: Any) -> Any:
        formatter = pick_formatter(options.get("format_error"), self.format_error)
        if formatter is not None:
            return await maybe_await(formatter(err, options))

        viewname = options.get("viewname") or self.settings.error_viewname
        page = {
            "pagedata": {"title": ERROR_PAGE_TITLE, "error": error_message(err)},
            "url": viewname,
        }
        return await self.render_template(page, **{**options, "viewname": viewname})

    async def resolve_template(self, **options: Any) -> str:
        """Resolve the template file for the merged options.

        Raises:
            AdapterConfigurationException: If no view name is configured
        """
        viewname = options.get("viewname") or self.viewname
        if not isinstance(viewname, str):
            raise AdapterConfigurationException(
                "viewname must be specified in order to render template",
                code=ErrorCode.CONFIG_MISSING,
            )
        fileext = options.get("fileext") or self.fileext

        candidates = build_view_candidates(
            viewname,
            fileext,
            dirname=options.get("dirname") or self.dirname,
            themename=options.get("themename") or self.themename,
            extname=options.get("extname") or self.extname,
            settings=self.settings,
        )
        return await find_valid_view_from_paths(with_fileext(viewname, fileext), candidates)

    async def render_template(self, data: Any, **options: Any) -> str:
        """Resolve, read and render a template.

        Args:
            data: Values handed to the template engine
            **options: Per-call overrides of the constructor options, plus
                ``resolve_filepath`` to return the resolved path instead of rendering
                and ``engine`` to use another engine for this call

        Returns:
            Rendered HTML, or the template path when ``resolve_filepath`` is set

        Raises:
            AdapterConfigurationException: If no view name is configured
            TemplateNotFoundException: If the resolved template cannot be read
        """
        filename = await self.resolve_template(**options)
        if options.get("resolve_filepath"):
            return filename

        try:
            template = await asyncio.to_thread(Path(filename).read_text, encoding="utf-8")
        except OSError as e:
            log_with_context(
                logger,
                "warning",
                "Template could not be read",
                template_path=filename,
                error=str(e),
                event_type="template_read_error",
            )
            raise TemplateNotFoundException(
                f"Template not found: {filename}",
                details={"filename": filename},
            ) from e

        engine_configuration = options.get("engine_configuration") or self.engine_configuration or {}
        engine = resolve_engine(options["engine"]) if options.get("engine") is not None else self.engine
        return await maybe_await(engine.render(template, data, {"filename": filename, **engine_configuration}))
