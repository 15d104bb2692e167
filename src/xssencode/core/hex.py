"""Hex escaping primitive shared by the attribute, script, style and URL encoders."""

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping

log = logging.getLogger(__name__)

HEX_MARKER = "{{hex}}"

HTML_ATTRIBUTE_FORMAT = "&#x{{hex}};"
JAVASCRIPT_FORMAT = "\\x{{hex}}"
CSS_FORMAT = "\\{{hex}}"
URL_FORMAT = "%{{hex}}"

# Printable ASCII: space (32) through tilde (126)
FIRST_ESCAPED = 32
LAST_ESCAPED = 126

_ALNUM = frozenset("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

UNSAFE_CHARACTERS = frozenset(
    chr(code)
    for code in range(FIRST_ESCAPED, LAST_ESCAPED + 1)
    if chr(code) not in _ALNUM
)


@lru_cache(maxsize=None)
def translation_table(template: str) -> Mapping[int, str]:
    """Return the escape table for ``template``, keyed by code point.

    The table only covers the unsafe printable ASCII characters; alphanumerics,
    control characters and everything from DEL upwards are absent and are
    therefore left untouched by ``str.translate``.

    The result is cached per template and wrapped read-only, so it can be
    shared between threads.
    """
    table = {
        ord(char): template.replace(HEX_MARKER, format(ord(char), "02x"))
        for char in UNSAFE_CHARACTERS
    }
    log.debug("Built hex table for %r (%d entries)", template, len(table))
    return MappingProxyType(table)


def hex_escape(value: Any, template: str = HTML_ATTRIBUTE_FORMAT) -> str:
    """Escape every non-alphanumeric printable ASCII character in ``value``.

    Each escaped character is replaced by ``template`` with ``{{hex}}``
    substituted by its two-digit lowercase hex code, e.g.
    ``hex_escape("<", "%{{hex}}") == "%3c"``.

    Args:
        value: Untrusted text. Anything that is not a ``str`` yields ``""``.
        template: Escape format containing the ``{{hex}}`` marker.

    Returns:
        The escaped string. Characters below 32 or above 126 pass through.
    """
    if not isinstance(value, str):
        log.debug("Refusing to hex-escape %s value", type(value).__name__)
        return ""
    return value.translate(translation_table(template))
