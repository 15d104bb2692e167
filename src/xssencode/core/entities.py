"""HTML entity encoding and tag stripping for element content."""

import re
from html.entities import codepoint2name
from types import MappingProxyType

# The five XML-significant characters. &apos; is not an HTML 4 entity, so
# the single quote gets a numeric reference.
_MARKUP_ENTITIES = {
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord('"'): "&quot;",
    ord("'"): "&#x27;",
}

# HTML 4 &lang; and &rang; were redefined by HTML5 (U+27E8, U+27E9); keep the
# original code points numeric so decoding gives them back.
_NUMERIC_ENTITIES = {
    0x2329: "&#x2329;",
    0x232A: "&#x232A;",
}

ENTITY_TABLE = MappingProxyType(
    {
        **{code: f"&{name};" for code, name in codepoint2name.items() if code > 127},
        **_NUMERIC_ENTITIES,
        **_MARKUP_ENTITIES,
    }
)

SLASH_ENTITY = "&#x2F;"

# Comments first, then tags. A tag starts at "<" not followed by whitespace and
# ends at the first ">" outside a quoted attribute value, or at end of input.
_TAG_RE = re.compile(
    r"<!--.*?(?:-->|\Z)"
    r"""|<(?!\s)(?:"[^"]*(?:"|\Z)|'[^']*(?:'|\Z)|[^'">])*(?:>|\Z)""",
    re.DOTALL,
)


def strip_tags(value: str) -> str:
    """Remove HTML/XML tags and comments from ``value``.

    Unclosed tags and comments are removed through the end of the string.
    A ``<`` followed by whitespace is kept as text.
    """
    return _TAG_RE.sub("", value)


def encode_entities(value: str) -> str:
    """Entity-encode markup characters and quotes, then forward slashes.

    Characters with an HTML 4 named entity (``é``, ``©``, ``&nbsp;`` ...)
    use that name; everything else passes through unchanged.
    """
    return value.translate(ENTITY_TABLE).replace("/", SLASH_ENTITY)
