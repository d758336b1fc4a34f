"""Template lookup and rendering for the HTML adapter.

The resolver picks a template file from an ordered list of candidate paths.
Engines turn template text plus data into a rendered string.
"""

from content_adapters.views.engines import Jinja2Engine, resolve_engine
from content_adapters.views.resolver import build_view_candidates, find_valid_view_from_paths

__all__ = ["Jinja2Engine", "build_view_candidates", "find_valid_view_from_paths", "resolve_engine"]
