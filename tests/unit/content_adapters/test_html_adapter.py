"""Tests for the HTML adapter."""

import logging
import os
from string import Template
from unittest.mock import MagicMock

import pytest

from content_adapters.adapters import HTMLAdapter
from content_adapters.exceptions import AdapterConfigurationException, TemplateNotFoundException


class StringTemplateEngine:
    """Custom engine backed by string.Template."""

    def render(self, template, data, options):
        return Template(template).substitute(data)


class AsyncEngine:
    """Custom engine whose render is a coroutine."""

    async def render(self, template, data, options):
        return f"async:{options['filename']}:{data['name']}"


@pytest.fixture
def html_adapter(settings):
    """HTML adapter with a default view name."""
    return HTMLAdapter(viewname="example", settings=settings)


class TestRender:
    """Tests for HTMLAdapter.render with the default engine."""

    @pytest.mark.asyncio
    async def test_finds_view_in_dirname(self, html_adapter, views_dir, other_views_dir, template_data):
        result = await html_adapter.render(template_data, dirname=[str(views_dir), str(other_views_dir)])

        assert result == "<p>Hello OG Bobby Johnson</p>"

    @pytest.mark.asyncio
    async def test_later_dirname_used_when_earlier_missing(self, html_adapter, tmp_path, other_views_dir, template_data):
        result = await html_adapter.render(template_data, dirname=[str(tmp_path / "nowhere"), str(other_views_dir)])

        assert result == "<p>Fallback OG Bobby Johnson</p>"

    @pytest.mark.asyncio
    async def test_resolve_filepath(self, html_adapter, views_dir, other_views_dir):
        result = await html_adapter.render({}, dirname=[str(views_dir), str(other_views_dir)], resolve_filepath=True)

        assert result == os.path.join(str(views_dir), "example.html")

    @pytest.mark.asyncio
    async def test_renders_default_view_when_nothing_found(self, html_adapter, views_dir, template_data):
        result = await html_adapter.render(template_data, viewname=str(views_dir / "example"))

        assert result == "<p>Hello OG Bobby Johnson</p>"

    @pytest.mark.asyncio
    async def test_missing_default_view_raises(self, html_adapter, template_data):
        with pytest.raises(TemplateNotFoundException):
            await html_adapter.render(template_data)

    @pytest.mark.asyncio
    async def test_missing_default_view_goes_to_callback(self, html_adapter, template_data):
        callback = MagicMock()

        await html_adapter.render(template_data, callback=callback)

        assert isinstance(callback.call_args.args[0], TemplateNotFoundException)

    @pytest.mark.asyncio
    async def test_missing_default_view_logs_template_path(self, html_adapter, template_data, caplog):
        """The read failure is logged with the path before the 404 error is raised."""
        with caplog.at_level(logging.WARNING, logger="content_adapters.adapters.html_adapter"):
            with pytest.raises(TemplateNotFoundException) as exc_info:
                await html_adapter.render(template_data)

        assert exc_info.value.status_code == 404
        record = caplog.records[-1]
        assert record.event_type == "template_read_error"
        assert record.template_path == "example.html"

    @pytest.mark.asyncio
    async def test_dotted_viewname_gets_extension(self, settings, views_dir, template_data):
        (views_dir / "user.profile.html").write_text("Profile {{ name }}", encoding="utf-8")
        adapter = HTMLAdapter(viewname="user.profile", settings=settings)

        result = await adapter.render(template_data, dirname=str(views_dir))

        assert result == "Profile OG Bobby Johnson"

    @pytest.mark.asyncio
    async def test_missing_viewname_raises(self, settings):
        with pytest.raises(AdapterConfigurationException, match="viewname"):
            await HTMLAdapter(settings=settings).render({})

    @pytest.mark.asyncio
    async def test_theme_views_folder(self, settings, template_data):
        theme_views = settings.themes_dir / "periodicjs.theme.default" / "views"
        theme_views.mkdir(parents=True)
        (theme_views / "example.html").write_text("Theme {{ name }}", encoding="utf-8")

        result = await HTMLAdapter(viewname="example", settings=settings).render(template_data)

        assert result == "Theme OG Bobby Johnson"

    @pytest.mark.asyncio
    async def test_extension_views_folder(self, settings, template_data):
        ext_views = settings.extensions_dir / "my-ext" / "views"
        ext_views.mkdir(parents=True)
        (ext_views / "example.html").write_text("Ext {{ name }}", encoding="utf-8")

        result = await HTMLAdapter(viewname="example", extname="my-ext", settings=settings).render(template_data)

        assert result == "Ext OG Bobby Johnson"

    @pytest.mark.asyncio
    async def test_app_views_folder(self, settings, views_dir, template_data):
        settings.views_dir = views_dir

        result = await HTMLAdapter(viewname="example", settings=settings).render(template_data)

        assert result == "<p>Hello OG Bobby Johnson</p>"

    @pytest.mark.asyncio
    async def test_engine_configuration(self, html_adapter, views_dir):
        result = await html_adapter.render(
            {"name": "<b>"},
            dirname=str(views_dir),
            engine_configuration={"autoescape": False},
        )

        assert result == "<p>Hello <b></p>"

    @pytest.mark.asyncio
    async def test_custom_format_render(self, html_adapter):
        result = await html_adapter.render({"a": 1}, format_render=lambda data, options: "custom")

        assert result == "custom"

    def test_sync_formatting_not_supported(self, html_adapter):
        with pytest.raises(AdapterConfigurationException):
            html_adapter.format_success({})
        with pytest.raises(TypeError):
            html_adapter.format_failure(ValueError("x"))


class TestCustomEngines:
    """Tests for caller-supplied template engines."""

    @pytest.mark.asyncio
    async def test_sync_custom_engine(self, settings, views_dir, template_data):
        adapter = HTMLAdapter(viewname="example", engine=StringTemplateEngine(), fileext="tmpl", settings=settings)

        result = await adapter.render(template_data, dirname=str(views_dir))

        assert result == "Hello OG Bobby Johnson"

    @pytest.mark.asyncio
    async def test_custom_engine_default_view(self, settings, views_dir, template_data):
        adapter = HTMLAdapter(viewname="example", engine=StringTemplateEngine(), fileext=".tmpl", settings=settings)

        result = await adapter.render(template_data, viewname=str(views_dir / "example"))

        assert result == "Hello OG Bobby Johnson"

    @pytest.mark.asyncio
    async def test_async_custom_engine(self, settings, views_dir, template_data):
        adapter = HTMLAdapter(viewname="example", engine=AsyncEngine(), settings=settings)

        result = await adapter.render(template_data, dirname=str(views_dir))

        assert result == f"async:{os.path.join(str(views_dir), 'example.html')}:OG Bobby Johnson"

    @pytest.mark.asyncio
    async def test_per_call_engine(self, html_adapter, views_dir, template_data):
        result = await html_adapter.render(template_data, dirname=str(views_dir), engine=AsyncEngine())

        assert result.startswith("async:")

    @pytest.mark.asyncio
    async def test_custom_engine_missing_view(self, settings, template_data):
        callback = MagicMock()
        adapter = HTMLAdapter(viewname="example", engine=StringTemplateEngine(), fileext=".tmpl", settings=settings)

        await adapter.render(template_data, callback=callback)

        assert isinstance(callback.call_args.args[0], Exception)


class TestError:
    """Tests for HTMLAdapter.error."""

    @pytest.mark.asyncio
    async def test_renders_error_template(self, settings, views_dir):
        adapter = HTMLAdapter(settings=settings)

        result = await adapter.error(ValueError("Some Random Error"), viewname="error", dirname=str(views_dir))

        assert result == "<h1>Not Found</h1><p>Some Random Error</p><span>error</span>"

    @pytest.mark.asyncio
    async def test_default_error_view_missing(self, settings):
        callback = MagicMock()

        await HTMLAdapter(settings=settings).error(ValueError("Some Random Error"), callback=callback)

        assert isinstance(callback.call_args.args[0], TemplateNotFoundException)

    @pytest.mark.asyncio
    async def test_error_viewname_from_settings(self, settings, views_dir):
        settings.error_viewname = "error"
        settings.views_dir = views_dir

        result = await HTMLAdapter(settings=settings).error({"message": "Gone"})

        assert "<p>Gone</p>" in result

    @pytest.mark.asyncio
    async def test_error_response_uses_exception_status(self, settings, views_dir):
        adapter = HTMLAdapter(settings=settings)

        response = await adapter.error_response(
            TemplateNotFoundException("nothing here"),
            viewname="error",
            dirname=str(views_dir),
        )

        assert response.status_code == 404
        assert response.media_type == "text/html"
        assert b"nothing here" in response.body
