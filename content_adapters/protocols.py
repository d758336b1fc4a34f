"""Protocol definitions for pluggable collaborators."""

from collections.abc import Awaitable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TemplateEngine(Protocol):
    """Protocol for template engines used by the HTML adapter.

    Any object exposing a ``render`` callable with this signature can be
    passed as ``engine``. The result may be a string or an awaitable
    resolving to one.
    """

    def render(self, template: str, data: Mapping[str, Any], options: Mapping[str, Any]) -> str | Awaitable[str]:
        """Render template text.

        Args:
            template: Template source text
            data: Values available to the template
            options: Engine options; ``filename`` holds the template path

        Returns:
            Rendered text
        """
        ...


@runtime_checkable
class ContentAdapter(Protocol):
    """Protocol every response adapter satisfies."""

    async def render(self, data: Any, **options: Any) -> Any: ...

    async def error(self, err: Any, **options: Any) -> Any: ...
