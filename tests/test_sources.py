"""Tests for candidate sources and output mapping."""

import io

import pytest

from chooser.errors import UnknownSelection
from chooser.mapper import map_output, split_selection
from chooser.sources.base import get_source
from chooser.sources.mapping import MappingSource, UnknownLabel, ValueMappingSource
from chooser.sources.sequence import SequenceSource
from chooser.sources.writer import WriterSource

FILES = {"foo.txt": "/abs/foo.txt", "bar.txt": "/abs/bar.txt"}


def fed(source):
    stream = io.StringIO()
    source.feed(stream)
    return stream.getvalue()


class TestSplitSelection:
    """Tests for split_selection."""

    def test_blank_lines_discarded(self):
        assert split_selection("a\n\n b \n") == ["a", "b"]

    def test_whitespace_only_lines(self):
        assert split_selection("  \n\t\nx\n") == ["x"]

    def test_empty_output(self):
        assert split_selection("") == []

    def test_order_preserved(self):
        assert split_selection("z\na\nm") == ["z", "a", "m"]


class TestMappingSource:
    """Tests for MappingSource."""

    def test_feeds_labels_in_mapping_order(self):
        assert fed(MappingSource(FILES)) == "foo.txt\nbar.txt\n"

    def test_maps_label_to_payload(self):
        assert map_output("foo.txt\n", MappingSource(FILES)) == ["/abs/foo.txt"]

    def test_payload_is_trimmed(self):
        source = MappingSource({"a": "  value  "})
        assert map_output("a\n", source) == ["value"]

    def test_selection_order_preserved(self):
        result = map_output("bar.txt\nfoo.txt\n", MappingSource(FILES))
        assert result == ["/abs/bar.txt", "/abs/foo.txt"]

    def test_results_come_from_mapping(self):
        result = map_output("foo.txt\nbogus\n  bar.txt \n", MappingSource(FILES))
        assert all(value in FILES.values() for value in result)

    def test_unknown_label_skipped(self):
        assert map_output("bogus\nfoo.txt\n", MappingSource(FILES)) == ["/abs/foo.txt"]

    def test_unknown_label_error(self):
        source = MappingSource(FILES, on_unknown=UnknownLabel.ERROR)

        with pytest.raises(UnknownSelection) as exc_info:
            map_output("bogus\n", source)

        assert exc_info.value.label == "bogus"

    def test_unknown_label_empty(self):
        source = MappingSource(FILES, on_unknown=UnknownLabel.EMPTY)
        assert map_output("bogus\nfoo.txt\n", source) == ["", "/abs/foo.txt"]


class TestValueMappingSource:
    """Tests for ValueMappingSource."""

    def test_feeds_sorted_labels(self):
        source = ValueMappingSource({"b": 2, "c": None, "a": object()})
        assert fed(source) == "a\nb\nc\n"

    def test_returns_label(self):
        source = ValueMappingSource({"one": 1, "two": 2})
        assert map_output("two\n", source) == ["two"]


class TestSequenceSource:
    """Tests for SequenceSource."""

    def test_feeds_in_order(self):
        assert fed(SequenceSource(["c", "a", "b"])) == "c\na\nb\n"

    def test_accepts_generator(self):
        source = SequenceSource(str(i) for i in range(3))
        assert fed(source) == "0\n1\n2\n"

    def test_line_is_payload(self):
        assert map_output(" c \na\n", SequenceSource(["a", "c"])) == ["c", "a"]


class TestWriterSource:
    """Tests for WriterSource."""

    def test_writer_controls_input(self):
        source = WriterSource(lambda stream: stream.write("raw line\nother\n"))
        assert fed(source) == "raw line\nother\n"

    def test_line_is_payload(self):
        source = WriterSource(lambda stream: None)
        assert map_output("raw line\n", source) == ["raw line"]


class TestGetSource:
    """Tests for get_source."""

    def test_string_mapping(self):
        assert isinstance(get_source(FILES), MappingSource)

    def test_typed_mapping(self):
        assert isinstance(get_source({"a": 1}), ValueMappingSource)

    def test_sequence(self):
        assert isinstance(get_source(["a", "b"]), SequenceSource)

    def test_writer(self):
        assert isinstance(get_source(lambda stream: None), WriterSource)

    def test_source_passes_through(self):
        source = SequenceSource(["a"])
        assert get_source(source) is source

    def test_string_rejected(self):
        with pytest.raises(TypeError):
            get_source("abc")
