try:
    from ._version import __version__
except ImportError:
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__ = version("xssencode")
    except PackageNotFoundError:
        __version__ = "unknown"

from xssencode.core.entities import strip_tags
from xssencode.core.exceptions import UnknownContextError, XSSEncodeError
from xssencode.core.hex import (
    CSS_FORMAT,
    HTML_ATTRIBUTE_FORMAT,
    JAVASCRIPT_FORMAT,
    URL_FORMAT,
    hex_escape,
)
from xssencode.runtime.escape import (
    Context,
    encode_for_context,
    encode_for_css,
    encode_for_html,
    encode_for_html_attribute,
    encode_for_javascript,
    encode_for_url,
)

__all__ = [
    "encode_for_html",
    "encode_for_html_attribute",
    "encode_for_javascript",
    "encode_for_css",
    "encode_for_url",
    "encode_for_context",
    "hex_escape",
    "strip_tags",
    "Context",
    "UnknownContextError",
    "XSSEncodeError",
    "HTML_ATTRIBUTE_FORMAT",
    "JAVASCRIPT_FORMAT",
    "CSS_FORMAT",
    "URL_FORMAT",
]
