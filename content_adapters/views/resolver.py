"""Template path resolution with ordered fallback."""

import asyncio
import os
from collections.abc import Sequence

from content_adapters.config import Settings, get_settings
from content_adapters.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def normalize_fileext(fileext: str) -> str:
    """Return ``fileext`` with a leading dot."""
    return fileext if fileext.startswith(".") else f".{fileext}"


def with_fileext(viewname: str, fileext: str | None) -> str:
    """Append ``fileext`` to ``viewname`` unless it already carries an extension."""
    if not fileext or os.path.splitext(viewname)[1]:
        return viewname
    return f"{viewname}{normalize_fileext(fileext)}"


def build_view_candidates(
    viewname: str,
    fileext: str | None,
    *,
    dirname: str | os.PathLike | Sequence[str | os.PathLike] | None = None,
    themename: str | None = None,
    extname: str | None = None,
    settings: Settings | None = None,
) -> list[str]:
    """Build the ordered list of template paths to probe, most specific first.

    Args:
        viewname: Template name relative to each lookup directory
        fileext: Template file extension, with or without the leading dot
        dirname: Explicit directory or directories, checked first
        themename: Theme folder checked under ``settings.themes_dir``
        extname: Extension folder checked under ``settings.extensions_dir``
        settings: Settings instance (defaults to the cached singleton)

    Returns:
        Candidate file paths
    """
    settings = settings or get_settings()
    filename = f"{viewname}{normalize_fileext(fileext)}" if fileext else viewname
    candidates: list[str] = []

    if dirname:
        dirs = [dirname] if isinstance(dirname, (str, os.PathLike)) else list(dirname)
        candidates.extend(os.path.join(d, filename) for d in dirs)
    if isinstance(themename, str) and fileext:
        candidates.append(os.path.join(settings.themes_dir, themename, "views", filename))
    if isinstance(extname, str) and fileext:
        candidates.append(os.path.join(settings.extensions_dir, extname, "views", filename))
    if settings.views_dir is not None:
        candidates.append(os.path.join(settings.views_dir, filename))

    return candidates


def _exists(path: str) -> bool:
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


async def find_valid_view_from_paths(default: str, candidates: Sequence[str] = ()) -> str:
    """Return the first candidate path that exists, or ``default``.

    Candidates are checked one at a time in order and the scan stops at the
    first hit. A filesystem error on a candidate counts as a miss. This
    function never raises.

    Args:
        default: Value returned when no candidate exists
        candidates: File paths to check, most specific first

    Returns:
        The first existing candidate or ``default``
    """
    if not candidates:
        return default

    for path in candidates:
        if await asyncio.to_thread(_exists, path):
            return path

    log_with_context(
        logger,
        "debug",
        "No candidate template path exists, using default",
        default=default,
        candidates=list(candidates),
        event_type="view_resolution_miss",
    )
    return default
