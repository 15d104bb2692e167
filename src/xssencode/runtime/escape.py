"""Context-aware output encoders for XSS prevention.

Pick the encoder for the place the value is written to:

    <p>{encode_for_html(name)}</p>
    <input value="{encode_for_html_attribute(name)}">
    <script>var name = '{encode_for_javascript(name)}';</script>
    <div style="width: {encode_for_css(width)};">
    <a href="/search?q={encode_for_url(query)}">

None of these make a value safe in a different context, and the attribute
encoder is not enough for ``href``, ``src``, ``style`` or event handlers.
"""

import logging
from enum import Enum
from typing import Any, Union

from xssencode.core.entities import encode_entities
from xssencode.core.entities import strip_tags as _strip_tags
from xssencode.core.exceptions import UnknownContextError
from xssencode.core.hex import (
    CSS_FORMAT,
    HTML_ATTRIBUTE_FORMAT,
    JAVASCRIPT_FORMAT,
    URL_FORMAT,
    hex_escape,
)

log = logging.getLogger(__name__)


class Context(str, Enum):
    """Output contexts an untrusted value can be embedded in."""

    HTML = "html"
    HTML_ATTRIBUTE = "html_attribute"
    JAVASCRIPT = "javascript"
    CSS = "css"
    URL = "url"

    @classmethod
    def parse(cls, name: Union[str, "Context"]) -> "Context":
        """Resolve a context from its value or a short alias, ignoring case."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "_")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnknownContextError(str(name)) from None


_ALIASES = {
    "attr": "html_attribute",
    "attribute": "html_attribute",
    "js": "javascript",
}


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            log.debug("Dropping %d bytes of invalid UTF-8", len(value))
            return ""
    return str(value)


def encode_for_html(value: Any, strip_tags: bool = False) -> str:
    """Encode a value for HTML element content.

    Escapes: & < > " ' and / (plus characters with a named HTML entity)

    Args:
        value: Text to encode. ``None`` becomes ``""``, bytes are decoded
            as UTF-8 (invalid input becomes ``""``), other values go
            through ``str()``.
        strip_tags: Remove tags and comments before encoding.

    Returns:
        Entity-encoded string safe for embedding between tags
    """
    text = _coerce_text(value)
    if strip_tags:
        text = _strip_tags(text)
    return encode_entities(text)


def encode_for_html_attribute(value: Any) -> str:
    """Encode a value for a simple, quoted HTML attribute (width, name, value)."""
    return hex_escape(value, HTML_ATTRIBUTE_FORMAT)


def encode_for_javascript(value: Any) -> str:
    """Encode a value for use inside a quoted JavaScript string literal.

    The caller writes the surrounding quotes. Quotes and backslashes in the
    value are hex-escaped like any other punctuation, never with ``\\"``.
    """
    return hex_escape(value, JAVASCRIPT_FORMAT)


def encode_for_css(value: Any) -> str:
    """Encode a value for a CSS property value (not selectors or whole rules)."""
    return hex_escape(value, CSS_FORMAT)


def encode_for_url(value: Any) -> str:
    """Encode a single query parameter value.

    Do not pass whole or relative URLs; validate those separately and then
    attribute-encode them.
    """
    return hex_escape(value, URL_FORMAT)


_ENCODERS = {
    Context.HTML_ATTRIBUTE: encode_for_html_attribute,
    Context.JAVASCRIPT: encode_for_javascript,
    Context.CSS: encode_for_css,
    Context.URL: encode_for_url,
}


def encode_for_context(
    value: Any, context: Union[str, Context], strip_tags: bool = False
) -> str:
    """Encode ``value`` with the encoder registered for ``context``.

    ``strip_tags`` only applies to :attr:`Context.HTML`.

    Raises:
        UnknownContextError: If ``context`` does not name a known context.
    """
    resolved = Context.parse(context)
    if resolved is Context.HTML:
        return encode_for_html(value, strip_tags=strip_tags)
    return _ENCODERS[resolved](value)
