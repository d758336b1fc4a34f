"""Adapter that wraps response data in an envelope and converts it to XML."""

from collections.abc import Mapping
from typing import Any

from content_adapters.adapters.json_adapter import JSONAdapter
from content_adapters.adapters.xml_codec import to_xml
from content_adapters.exceptions import AdapterConfigurationException, ErrorCode
from content_adapters.models.envelope import error_envelope, error_message, error_status, success_envelope


class XMLAdapter(JSONAdapter):
    """Renders success and error envelopes as XML documents.

    Options (constructor defaults, overridable per call):
        skip_conversion: Return the data unchanged instead of converting it
        xml_root: Tag of the document root element
        xml_configuration: Conversion settings, see ``xml_codec.to_xml``
    """

    media_type = "application/xml"
    supports_jsonp = False

    def __init__(
        self,
        skip_conversion: bool = False,
        xml_root: str | None = None,
        xml_configuration: Mapping[str, Any] | None = None,
        **options: Any,
    ):
        super().__init__(**options)
        self.skip_conversion = skip_conversion
        self.xml_root = xml_root
        self.xml_configuration = xml_configuration

    def _skip(self, options: Mapping[str, Any]) -> bool:
        skip = options.get("skip_conversion")
        return skip if isinstance(skip, bool) else bool(self.skip_conversion)

    def _root(self, options: Mapping[str, Any]) -> str:
        xml_root = options.get("xml_root") or self.xml_root or self.settings.xml_root
        if not isinstance(xml_root, str):
            raise AdapterConfigurationException(
                "xml_root must be a string, please provide options.xml_root or set adapter.xml_root",
                code=ErrorCode.CONFIG_MISSING,
            )
        return xml_root

    def _configuration(self, options: Mapping[str, Any]) -> Mapping[str, Any] | None:
        configuration = options.get("xml_configuration") or self.xml_configuration
        return configuration if isinstance(configuration, Mapping) else None

    def _default_success(self, data: Any, **options: Any) -> Any:
        if self._skip(options):
            return data
        return to_xml(self._root(options), success_envelope(data), self._configuration(options))

    def _default_failure(self, err: Any, **options: Any) -> Any:
        if self._skip(options):
            return err
        envelope = error_envelope(error_message(err), status=error_status(err))
        return to_xml(self._root(options), envelope, self._configuration(options))
