"""Response adapters.

Each adapter exposes ``render`` and ``error`` coroutines plus
``to_response``/``error_response`` for FastAPI integration.
"""

from content_adapters.adapters.html_adapter import HTMLAdapter
from content_adapters.adapters.json_adapter import JSONAdapter
from content_adapters.adapters.xml_adapter import XMLAdapter

__all__ = ["HTMLAdapter", "JSONAdapter", "XMLAdapter"]
