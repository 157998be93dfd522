"""
Tests for the streaming script tokenizer.

This module tests:
- Record extraction from single and multiple chunks
- Lines split across chunk boundaries
- Skipped lines and line numbering
- End of input handling
- Byte decoding and async sources
"""

import asyncio
import io

import pytest

from magickscript.parsing.tokenizer import (
    ScriptRecord,
    ScriptTokenizer,
    atokenize,
    decode_chunks,
    read_chunks,
    tokenize,
)

SCRIPT = 'var A="1"\nrange x 0 10 2\nimg b p.png\n'


def pairs(records):
    return [(r.command, r.args) for r in records]


def split_every(text: str, size: int) -> list[str]:
    return [text[i : i + size] for i in range(0, len(text), size)]


class TestTokenize:
    """Test tokenizing complete scripts."""

    def test_single_chunk(self):
        """Test a whole script in one chunk yields one record per command."""
        assert pairs(tokenize([SCRIPT])) == [
            ("var", 'A="1"'),
            ("range", "x 0 10 2"),
            ("img", "b p.png"),
        ]

    def test_line_split_across_chunks(self):
        """Test a line straddling two chunks is reassembled."""
        chunks = ['var A="1"\nrange x 0', ' 10 2\nimg b p.png\n']
        assert pairs(tokenize(chunks)) == pairs(tokenize([SCRIPT]))

    @pytest.mark.parametrize("size", [1, 2, 3, 5, 7, 13])
    def test_any_split_offset(self, size):
        """Test splitting at every offset gives the same records."""
        assert list(tokenize(split_every(SCRIPT, size))) == list(tokenize([SCRIPT]))

    def test_split_inside_command_name(self):
        """Test a command name cut in half is not emitted as two commands."""
        assert pairs(tokenize(["ra", "nge y 1 2 1\n"])) == [("range", "y 1 2 1")]

    def test_split_before_newline(self):
        """Test a record is only emitted once its newline arrives."""
        tokenizer = ScriptTokenizer()
        assert tokenizer.feed("img a b.png") == []
        records = tokenizer.feed("\n")
        assert pairs(records) == [("img", "a b.png")]

    def test_empty_stream(self):
        """Test an empty stream yields no records."""
        assert list(tokenize([])) == []
        assert list(tokenize(["", ""])) == []

    def test_final_line_without_newline(self):
        """Test the trailing unterminated line is emitted at end of input."""
        assert pairs(tokenize(["var A=\"1\"\nmiff start.miff"])) == [
            ("var", 'A="1"'),
            ("miff", "start.miff"),
        ]

    def test_leading_whitespace_removed_from_args(self):
        """Test whitespace between command and arguments is not part of args."""
        assert pairs(tokenize(["img    b p.png\n"])) == [("img", "b p.png")]

    def test_command_without_args(self):
        """Test a bare command yields empty argument text."""
        assert pairs(tokenize(["miff\n"])) == [("miff", "")]

    def test_crlf_line_endings(self):
        """Test carriage returns are not kept in argument text."""
        assert pairs(tokenize(["img a b.png\r\nmiff c\r\n"])) == [
            ("img", "a b.png"),
            ("miff", "c"),
        ]


class TestSkippedLines:
    """Test lines that are not commands."""

    @pytest.mark.parametrize(
        "line",
        ["", "   ", "# comment", "  range x 0 1 1", "Var A=\"1\"", "1 2 3", "-- note"],
    )
    def test_non_command_lines_skipped(self, line):
        """Test lines not starting with a lowercase run produce no record."""
        assert list(tokenize([line + "\n"])) == []

    def test_line_numbers_count_skipped_lines(self):
        """Test record line numbers are physical 1-based line numbers."""
        text = "# header\n\nvar A=\"1\"\n  indented\nrange x 0 1 1\n"
        records = list(tokenize([text]))
        assert [r.line for r in records] == [3, 5]

    def test_line_numbers_across_chunks(self):
        """Test line numbers are unaffected by chunking."""
        records = list(tokenize(split_every("\nimg a b\n\nimg c d", 2)))
        assert [(r.line, r.command) for r in records] == [(2, "img"), (4, "img")]


class TestScriptTokenizer:
    """Test the incremental tokenizer state."""

    def test_pending_line_dropped_on_close_when_not_command(self):
        """Test a trailing non-command tail is discarded."""
        tokenizer = ScriptTokenizer()
        tokenizer.feed("img a b\n# tail")
        assert tokenizer.close() == []
        assert tokenizer.line == 2

    def test_close_is_idempotent(self):
        """Test closing twice emits nothing the second time."""
        tokenizer = ScriptTokenizer()
        tokenizer.feed("miff a")
        assert len(tokenizer.close()) == 1
        assert tokenizer.close() == []

    def test_long_line_in_single_character_chunks(self):
        """Test a very long line fed one character at a time is one record."""
        args = "b " + "x" * 200_000
        tokenizer = ScriptTokenizer()
        for char in "img " + args:
            assert tokenizer.feed(char) == []
        records = tokenizer.feed("\nmiff c")
        assert pairs(records) == [("img", args)]
        assert pairs(tokenizer.close()) == [("miff", "c")]

    def test_carriage_return_split_from_newline(self):
        """Test a CR at the end of one chunk and LF in the next is stripped."""
        tokenizer = ScriptTokenizer()
        tokenizer.feed("img a b\r")
        assert pairs(tokenizer.feed("\n")) == [("img", "a b")]

    def test_feed_after_close_rejected(self):
        """Test feeding a closed tokenizer raises ValueError."""
        tokenizer = ScriptTokenizer()
        tokenizer.close()
        with pytest.raises(ValueError):
            tokenizer.feed("miff a\n")

    def test_record_str(self):
        """Test the record renders as its command line."""
        assert str(ScriptRecord(1, "img", "a b.png")) == "img a b.png"
        assert str(ScriptRecord(1, "miff", "")) == "miff"


class TestSources:
    """Test the chunk source helpers."""

    def test_decode_split_multibyte_character(self):
        """Test a UTF-8 character split between byte chunks is reassembled."""
        data = 'var T="café"\n'.encode()
        cut = data.index(b"\xc3") + 1
        chunks = list(decode_chunks([data[:cut], data[cut:]]))
        assert "".join(chunks) == 'var T="café"\n'
        assert pairs(tokenize(chunks)) == [("var", 'T="café"')]

    def test_read_chunks(self):
        """Test a text stream is read in fixed-size pieces."""
        assert list(read_chunks(io.StringIO("abcdefg"), 3)) == ["abc", "def", "g"]

    def test_async_tokenize_matches_sync(self):
        """Test the async tokenizer yields the same records as the sync one."""

        async def source():
            for chunk in split_every(SCRIPT, 4):
                yield chunk

        async def collect():
            return [record async for record in atokenize(source())]

        assert asyncio.run(collect()) == list(tokenize([SCRIPT]))
