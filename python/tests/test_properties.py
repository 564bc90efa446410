"""Tests for the property file reader and writer."""

import io

from dictmeta import properties


class TestParse:
    """Tests for properties.parse()."""

    def test_simple(self):
        """Test key=value lines keep file order."""
        props = properties.parse(["b=2\n", "a=1\n"])
        assert props == {"b": "2", "a": "1"}
        assert list(props) == ["b", "a"]

    def test_comments_and_blanks(self):
        """Test comment and blank lines are skipped."""
        content = "# comment\n! also a comment\n\n   \nkey=value\n"
        assert properties.parse(io.StringIO(content)) == {"key": "value"}

    def test_separators(self):
        """Test "=", ":" and whitespace separators."""
        props = properties.parse([
            "a=1",
            "b:2",
            "c 3",
            "d = 4",
            "e\t:\t5",
        ])
        assert props == {"a": "1", "b": "2", "c": "3", "d": "4", "e": "5"}

    def test_value_keeps_delimiters(self):
        """Test only the first separator splits key and value."""
        props = properties.parse(["fsa.dict.input-conversion=ﬁ=fi, ﬂ=fl"])
        assert props["fsa.dict.input-conversion"] == "ﬁ=fi, ﬂ=fl"

    def test_separator_value(self):
        """Test a value that is itself a separator character."""
        assert properties.parse(["fsa.dict.separator=="]) == {"fsa.dict.separator": "="}
        assert properties.parse(["fsa.dict.separator=:"]) == {"fsa.dict.separator": ":"}

    def test_empty_value(self):
        """Test keys without value."""
        assert properties.parse(["key=", "other"]) == {"key": "", "other": ""}

    def test_continuation(self):
        """Test backslash-continued lines are joined."""
        content = "pairs=a b, \\\n    c d\nnext=1\n"
        props = properties.parse(io.StringIO(content))
        assert props == {"pairs": "a b, c d", "next": "1"}

    def test_escapes(self):
        """Test escape sequences."""
        props = properties.parse([
            r"caf\u00e9=yes",
            r"tab=a\tb",
            r"with\ space=x",
            r"back=c:\\dir",
        ])
        assert props == {
            "café": "yes",
            "tab": "a\tb",
            "with space": "x",
            "back": "c:\\dir",
        }

    def test_duplicate_key(self):
        """Test later duplicates replace earlier ones."""
        assert properties.parse(["a=1", "a=2"]) == {"a": "2"}


class TestDump:
    """Tests for properties.dump()."""

    def test_comment_and_lines(self):
        """Test the comment line comes first."""
        out = io.StringIO()
        properties.dump({"a": "1", "b": "ł"}, out, comment="DictionaryMetadata")
        assert out.getvalue() == "# DictionaryMetadata\na=1\nb=ł\n"

    def test_no_comment(self):
        """Test writing without a comment."""
        out = io.StringIO()
        properties.dump({"a": "1"}, out)
        assert out.getvalue() == "a=1\n"

    def test_escaped_values_read_back(self):
        """Test awkward values survive a write and read."""
        original = {
            "separator.space": " ",
            "separator.equals": "=",
            "separator.colon": ":",
            "separator.tab": "\t",
            "separator.hash": "#",
            "back": "a\\b",
            "key with=sep": "x",
        }
        out = io.StringIO()
        properties.dump(original, out)
        assert properties.parse(io.StringIO(out.getvalue())) == original

    def test_writer_not_closed(self):
        """Test the writer stays open."""
        out = io.StringIO()
        properties.dump({"a": "1"}, out)
        assert not out.closed
