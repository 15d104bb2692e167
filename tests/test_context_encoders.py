import string
import unittest

from xssencode import (
    Context,
    UnknownContextError,
    encode_for_context,
    encode_for_css,
    encode_for_html,
    encode_for_html_attribute,
    encode_for_javascript,
    encode_for_url,
)

PRINTABLE = "".join(chr(c) for c in range(32, 127))
ALNUM = set(string.ascii_letters + string.digits)


class TestContextEncoders(unittest.TestCase):
    def test_attribute_breakout(self) -> None:
        self.assertEqual(
            encode_for_html_attribute('" onmouseover="alert(1)'),
            "&#x22;&#x20;onmouseover&#x3d;&#x22;alert&#x28;1&#x29;",
        )

    def test_javascript_string_breakout(self) -> None:
        self.assertEqual(
            encode_for_javascript("'; alert(1); //"),
            r"\x27\x3b\x20alert\x281\x29\x3b\x20\x2f\x2f",
        )

    def test_javascript_backslash_is_hex_escaped(self) -> None:
        # Never \" shortcuts, which can be undone by an escaped escape
        self.assertEqual(encode_for_javascript('\\"'), r"\x5c\x22")

    def test_css_value(self) -> None:
        self.assertEqual(encode_for_css("red;}"), r"red\3b\7d")
        self.assertEqual(encode_for_css("expression(x)"), r"expression\28x\29")

    def test_url_parameter(self) -> None:
        self.assertEqual(encode_for_url("a b&c=d"), "a%20b%26c%3dd")
        self.assertEqual(encode_for_url("javascript:x"), "javascript%3ax")

    def test_non_string_returns_empty(self) -> None:
        for encoder in (
            encode_for_html_attribute,
            encode_for_javascript,
            encode_for_css,
            encode_for_url,
        ):
            self.assertEqual(encoder(None), "")
            self.assertEqual(encoder(123), "")
            self.assertEqual(encoder(b"<x>"), "")

    def test_only_template_punctuation_survives(self) -> None:
        # Every printable ASCII character at once; the only punctuation left
        # in the output is what the escape format itself introduces.
        cases = [
            (encode_for_html_attribute, {"&", "#", ";"}),
            (encode_for_javascript, {"\\"}),
            (encode_for_css, {"\\"}),
            (encode_for_url, {"%"}),
        ]
        for encoder, allowed in cases:
            with self.subTest(encoder=encoder.__name__):
                leftover = set(encoder(PRINTABLE)) - ALNUM
                self.assertLessEqual(leftover, allowed)

    def test_html_has_no_raw_markup(self) -> None:
        encoded = encode_for_html(PRINTABLE)
        for char in "<>\"'/":
            self.assertNotIn(char, encoded)


class TestEncodeForContext(unittest.TestCase):
    def test_dispatch_by_name(self) -> None:
        self.assertEqual(encode_for_context("<", "html"), "&lt;")
        self.assertEqual(encode_for_context("<", "html_attribute"), "&#x3c;")
        self.assertEqual(encode_for_context("<", "javascript"), r"\x3c")
        self.assertEqual(encode_for_context("<", "css"), r"\3c")
        self.assertEqual(encode_for_context("<", "url"), "%3c")

    def test_dispatch_by_enum(self) -> None:
        self.assertEqual(encode_for_context("a b", Context.URL), "a%20b")

    def test_aliases_and_case(self) -> None:
        self.assertIs(Context.parse("attr"), Context.HTML_ATTRIBUTE)
        self.assertIs(Context.parse("Attribute"), Context.HTML_ATTRIBUTE)
        self.assertIs(Context.parse("html-attribute"), Context.HTML_ATTRIBUTE)
        self.assertIs(Context.parse(" JS "), Context.JAVASCRIPT)
        self.assertIs(Context.parse(Context.CSS), Context.CSS)

    def test_strip_tags_only_for_html(self) -> None:
        self.assertEqual(encode_for_context("<b>hi</b>", "html", strip_tags=True), "hi")
        self.assertEqual(
            encode_for_context("<b>", "url", strip_tags=True), "%3cb%3e"
        )

    def test_unknown_context(self) -> None:
        with self.assertRaises(UnknownContextError) as cm:
            encode_for_context("x", "sql")
        self.assertEqual(cm.exception.context, "sql")
        self.assertIsInstance(cm.exception, ValueError)


if __name__ == "__main__":
    unittest.main()
