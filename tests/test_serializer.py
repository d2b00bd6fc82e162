"""Tests for the flatini serializer module."""

import unittest
import warnings

from flatini import IniDocument, KeyNotFound, dump_section, dumps, loads

VALID = (
    "[owner]\n"
    "name = John Doe\n"
    "[database]\n"
    "server = 192.0.2.62\n"
    "only key = \n"
)


class TestDumps(unittest.TestCase):
    """Test rendering documents as text."""

    def test_default_format(self) -> None:
        """Test sections and pairs in insertion order, '=' without spaces."""
        doc = loads("[owner]\nname = John Doe\n[database]\nserver = 192.0.2.62\n")
        self.assertEqual(
            dumps(doc),
            "[owner]\nname=John Doe\n[database]\nserver=192.0.2.62\n",
        )

    def test_str_is_dumps(self) -> None:
        doc = loads(VALID)
        self.assertEqual(str(doc), dumps(doc))

    def test_empty_document(self) -> None:
        self.assertEqual(dumps(IniDocument()), "")

    def test_padded_delimiter(self) -> None:
        doc = loads("[owner]\nname=John Doe\n")
        self.assertEqual(
            dumps(doc, delimiter=" = "), "[owner]\nname = John Doe\n")

    def test_colon_delimiter_rejected(self) -> None:
        """Test a delimiter that wouldn't read back is refused."""
        with self.assertRaises(ValueError):
            dumps(loads(VALID), delimiter=" : ")

    def test_blank_lines(self) -> None:
        doc = loads("[a]\nx=1\n[b]\ny=2\n")
        self.assertEqual(
            dumps(doc, blank_lines=1), "[a]\nx=1\n\n[b]\ny=2\n\n")
        with self.assertRaises(ValueError):
            dumps(doc, blank_lines=-1)

    def test_dump_section(self) -> None:
        self.assertEqual(
            dump_section("s", {"k": "v", "e": ""}), "[s]\nk=v\ne=\n")

    def test_plain_dicts(self) -> None:
        """Test any mapping of mappings can be rendered."""
        self.assertEqual(dumps({"s": {"k": "v"}}), "[s]\nk=v\n")

    def test_unsafe_content_warns(self) -> None:
        """Test content that won't read back triggers a warning."""
        doc = IniDocument()
        doc.set_value("s", "k", "a;b")
        with self.assertWarns(UserWarning):
            text = dumps(doc)
        self.assertEqual(text, "[s]\nk=a;b\n")

        for section, key, value in (
            ("s", "k", "a=b"),
            ("s", " k", "v"),
            ("s", "", "v"),
            ("[s]", "k", "v"),
            ("s", "k", "line\nbreak"),
        ):
            doc = IniDocument()
            doc.set_value(section, key, value)
            with self.assertWarns(UserWarning):
                dumps(doc)

    def test_safe_content_silent(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            dumps(loads(VALID))


class TestRoundTrip(unittest.TestCase):
    """Test that parse(dumps(doc)) reproduces doc."""

    def test_round_trip(self) -> None:
        doc = loads("[owner]\nname = John Doe\n[database]\nserver = 192.0.2.62\n")
        again = loads(dumps(doc))
        self.assertEqual(again.sections(), doc.sections())

    def test_round_trip_options(self) -> None:
        doc = loads(VALID)
        again = loads(dumps(doc, delimiter=" = ", blank_lines=2))
        self.assertEqual(again.sections(), doc.sections())

    def test_round_trip_after_set(self) -> None:
        doc = loads(VALID)
        doc.set_value("new", "key", "value with spaces")
        again = loads(str(doc))
        self.assertEqual(again.get_value("new", "key"), "value with spaces")
        self.assertEqual(again.sections(), doc.sections())

    def test_empty_value_round_trip(self) -> None:
        """Test an empty value survives, but still reads as missing."""
        again = loads(dumps(loads(VALID)))
        self.assertTrue(again.has_key("database", "only key"))
        with self.assertRaises(KeyNotFound):
            again.get_value("database", "only key")


if __name__ == "__main__":
    unittest.main()
