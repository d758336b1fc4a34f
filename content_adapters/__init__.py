"""Response formatting adapters for JSON, XML and HTML payloads."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("content-adapters")
except PackageNotFoundError:
    __version__ = "dev"

from content_adapters.adapters import HTMLAdapter, JSONAdapter, XMLAdapter  # noqa: E402
from content_adapters.interface import ADAPTERS, create_adapter  # noqa: E402
from content_adapters.views.resolver import find_valid_view_from_paths  # noqa: E402

__all__ = [
    "ADAPTERS",
    "HTMLAdapter",
    "JSONAdapter",
    "XMLAdapter",
    "create_adapter",
    "find_valid_view_from_paths",
]
