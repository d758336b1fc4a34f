"""Adapter factory and interface checks."""

from typing import Any

from content_adapters.adapters import HTMLAdapter, JSONAdapter, XMLAdapter
from content_adapters.exceptions import AdapterConfigurationException, ErrorCode, UnknownAdapterException
from content_adapters.protocols import ContentAdapter

ADAPTERS: dict[str, type] = {
    "json": JSONAdapter,
    "xml": XMLAdapter,
    "html": HTMLAdapter,
}

REQUIRED_METHODS = ("render", "error")


def validate_adapter(adapter: Any) -> ContentAdapter:
    """Ensure ``adapter`` exposes every required method.

    Raises:
        AdapterConfigurationException: If a required method is missing or not callable
    """
    missing = [name for name in REQUIRED_METHODS if not callable(getattr(adapter, name, None))]
    if missing:
        raise AdapterConfigurationException(
            f"{type(adapter).__name__} is missing required adapter methods: {', '.join(missing)}",
            code=ErrorCode.INVALID_ADAPTER,
            details={"missing": missing},
        )
    return adapter


def create_adapter(adapter: str | type = "json", **options: Any) -> ContentAdapter:
    """Construct an adapter by registered name or from a custom class.

    Args:
        adapter: A name in ``ADAPTERS`` or a class whose instances provide ``render`` and ``error``
        **options: Passed to the adapter constructor

    Returns:
        The constructed adapter

    Raises:
        UnknownAdapterException: If ``adapter`` is a name with no registered adapter
        AdapterConfigurationException: If the constructed adapter lacks required methods

    Example:
        xml = create_adapter("xml", xml_root="response")
        body = await xml.render({"user": "someone"})
    """
    if isinstance(adapter, str):
        try:
            adapter_cls = ADAPTERS[adapter.lower()]
        except KeyError:
            raise UnknownAdapterException(adapter) from None
    elif isinstance(adapter, type):
        adapter_cls = adapter
    else:
        raise AdapterConfigurationException(
            "adapter must be a registered adapter name or a class",
            code=ErrorCode.INVALID_ADAPTER,
        )
    return validate_adapter(adapter_cls(**options))
