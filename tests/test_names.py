import unittest

from phat.names import attname, sanitize_attr_name, sanitize_tag_name, tagname


class TestSanitizeTagName(unittest.TestCase):
    def test_plain_name(self):
        self.assertEqual(sanitize_tag_name("div"), "div")
        self.assertEqual(sanitize_tag_name("svg:rect"), "svg:rect")
        self.assertEqual(sanitize_tag_name("my-element.x_1"), "my-element.x_1")

    def test_reads_name_from_tag(self):
        self.assertEqual(sanitize_tag_name("<img src=x>"), "img")
        self.assertEqual(sanitize_tag_name("  <<p class='a'>text</p>"), "p")
        self.assertEqual(sanitize_tag_name("<br/>"), "br")

    def test_stops_at_first_invalid_character(self):
        self.assertEqual(sanitize_tag_name("h1 onclick"), "h1")
        self.assertEqual(sanitize_tag_name("a>b"), "a")

    def test_nothing_valid(self):
        self.assertEqual(sanitize_tag_name(""), "")
        self.assertEqual(sanitize_tag_name("<"), "")
        self.assertEqual(sanitize_tag_name("!x"), "")

    def test_non_string(self):
        self.assertEqual(sanitize_tag_name(None), "")
        self.assertEqual(sanitize_tag_name(1), "")
        self.assertEqual(sanitize_tag_name(["div"]), "")

    def test_alias(self):
        self.assertIs(tagname, sanitize_tag_name)


class TestSanitizeAttrName(unittest.TestCase):
    def test_valid_names(self):
        for name in ["id", "data-x", "xml:lang", "v.model", "_x", "aria-label"]:
            self.assertEqual(sanitize_attr_name(name), name)

    def test_drops_from_equals_or_gt(self):
        self.assertEqual(sanitize_attr_name("title=foo"), "title")
        self.assertEqual(sanitize_attr_name("a>b=c"), "a")

    def test_drops_invalid_characters(self):
        self.assertEqual(sanitize_attr_name("on click"), "onclick")
        self.assertEqual(sanitize_attr_name("\"x'<y"), "xy")
        self.assertEqual(sanitize_attr_name("@@@"), "")

    def test_unicode_letters(self):
        self.assertEqual(sanitize_attr_name("données"), "données")

    def test_non_decimal_numerics_dropped(self):
        self.assertEqual(sanitize_attr_name("data-½²"), "data-")
        self.assertEqual(sanitize_attr_name("x\u0663"), "x\u0663")

    def test_start_character_not_enforced(self):
        self.assertEqual(sanitize_attr_name("1x"), "1x")
        self.assertEqual(sanitize_attr_name("-x"), "-x")

    def test_strict(self):
        self.assertEqual(sanitize_attr_name("1x", strict=True), "")
        self.assertEqual(sanitize_attr_name("-x", strict=True), "")
        self.assertEqual(sanitize_attr_name("_x", strict=True), "_x")
        self.assertEqual(sanitize_attr_name(" é1", strict=True), "é1")

    def test_non_string(self):
        self.assertEqual(sanitize_attr_name(None), "")
        self.assertEqual(sanitize_attr_name(5), "")

    def test_idempotent(self):
        for name in ["title=foo", "on click", "a>b", "@x-y:z.w", "", "données!", "1 = 2", "\n\tid"]:
            once = sanitize_attr_name(name)
            self.assertEqual(sanitize_attr_name(once), once)

    def test_alias(self):
        self.assertIs(attname, sanitize_attr_name)


if __name__ == "__main__":
    unittest.main()
