"""
Streaming tokenizer for magickscript scripts.

Scripts arrive as an arbitrary sequence of text chunks. A chunk may end in
the middle of a line, so the tokenizer keeps the unterminated tail of the
previous chunk and only emits a record once the line terminator (or the end
of the stream) confirms the line is complete.
"""

import codecs
import re
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

LINE_PATTERN = re.compile(r"^(?P<command>[a-z]+)\s*(?P<args>.*)$")

DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class ScriptRecord:
    """A single command line of a script.

    Params:
        line: 1-based line number of the command in the script
        command: Lowercase command name
        args: Raw argument text following the command name
    """

    line: int
    command: str
    args: str

    def __str__(self) -> str:
        return f"{self.command} {self.args}" if self.args else self.command


class ScriptTokenizer:
    """Incremental splitter of text chunks into ScriptRecords."""

    def __init__(self):
        self._pending: list[str] = []
        self.line = 0
        self.closed = False

    def feed(self, chunk: str) -> list[ScriptRecord]:
        """
        Consume a chunk and return the records it completes.

        Only the new chunk is scanned for line terminators; an unterminated
        tail is kept as a list of parts until its newline arrives.

        Params:
            chunk: Next piece of script text, split at any offset

        Returns:
            Records for every line terminated within the chunk, in order
        """
        if self.closed:
            raise ValueError("feed() called on a closed tokenizer")

        records = []
        start = 0
        while (end := chunk.find("\n", start)) != -1:
            self._pending.append(chunk[start:end])
            record = self._consume_line("".join(self._pending))
            self._pending.clear()
            if record is not None:
                records.append(record)
            start = end + 1
        if start < len(chunk):
            self._pending.append(chunk[start:])
        return records

    def close(self) -> list[ScriptRecord]:
        """
        Signal end of input and flush the trailing unterminated line.

        Returns:
            A list holding the final record, if the tail is a command line
        """
        if self.closed:
            return []
        self.closed = True
        pending = "".join(self._pending)
        self._pending.clear()
        if not pending:
            return []
        record = self._consume_line(pending)
        return [record] if record is not None else []

    def _consume_line(self, text: str) -> ScriptRecord | None:
        self.line += 1
        if text.endswith("\r"):
            text = text[:-1]
        match = LINE_PATTERN.match(text)
        if match is None:
            return None
        return ScriptRecord(
            line=self.line,
            command=match.group("command"),
            args=match.group("args"),
        )


def tokenize(chunks: Iterable[str]) -> Iterator[ScriptRecord]:
    """
    Tokenize a synchronous stream of text chunks.

    Params:
        chunks: Script text, in arbitrary pieces

    Returns:
        Lazy iterator over the script records in line order
    """
    tokenizer = ScriptTokenizer()
    for chunk in chunks:
        yield from tokenizer.feed(chunk)
    yield from tokenizer.close()


async def atokenize(chunks: AsyncIterable[str]) -> AsyncIterator[ScriptRecord]:
    """Tokenize an asynchronous stream of text chunks."""
    tokenizer = ScriptTokenizer()
    async for chunk in chunks:
        for record in tokenizer.feed(chunk):
            yield record
    for record in tokenizer.close():
        yield record


def decode_chunks(
    chunks: Iterable[bytes], encoding: str = "utf-8"
) -> Iterator[str]:
    """
    Decode byte chunks into text chunks.

    Multi-byte characters split between two chunks are held back until
    their remaining bytes arrive.
    """
    decoder = codecs.getincrementaldecoder(encoding)()
    for chunk in chunks:
        text = decoder.decode(chunk)
        if text:
            yield text
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


def read_chunks(stream: TextIO, size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """Yield successive reads of at most ``size`` characters from a text stream."""
    while chunk := stream.read(size):
        yield chunk
