"""Tests for the indented writer."""

import io

import pytest

from resultsgen.text.emitter import INDENT, IndentedWriter


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture
def writer(sink):
    return IndentedWriter(sink)


class TestWrite:
    def test_level_zero_has_no_indent(self, writer, sink):
        writer.write(0, "abc")
        assert sink.getvalue() == "abc"

    def test_each_level_adds_one_unit(self, writer, sink):
        writer.write(3, "x")
        assert sink.getvalue() == INDENT * 3 + "x"

    def test_no_trailing_newline(self, writer, sink):
        writer.write(1, "a")
        writer.write(0, "b")
        assert sink.getvalue() == "    ab"

    def test_indent_only(self, writer, sink):
        writer.write(2)
        assert sink.getvalue() == "        "

    def test_negative_level_fails(self, writer):
        with pytest.raises(ValueError):
            writer.write(-1, "x")


class TestWriteLine:
    def test_appends_newline(self, writer, sink):
        writer.write_line(1, "x")
        assert sink.getvalue() == "    x\n"

    def test_empty_line_has_no_indent(self, writer, sink):
        writer.write_line(2)
        assert sink.getvalue() == "\n"

    def test_default_is_blank_line(self, writer, sink):
        writer.write_line()
        assert sink.getvalue() == "\n"

    def test_nested_block(self, writer, sink):
        writer.write_line(0, "{")
        writer.write_line(1, "{")
        writer.write_line(2, "x;")
        writer.write_line(1, "}")
        writer.write_line(0, "}")
        assert sink.getvalue() == "{\n    {\n        x;\n    }\n}\n"

    def test_negative_level_fails(self, writer):
        with pytest.raises(ValueError):
            writer.write_line(-2, "x")

    def test_custom_indent_unit(self, sink):
        writer = IndentedWriter(sink, indent="\t")
        writer.write_line(2, "x")
        assert sink.getvalue() == "\t\tx\n"
