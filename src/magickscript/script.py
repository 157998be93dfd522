"""
Script loading entry points.

Every loader streams its input through the tokenizer into a fresh
ContextFactory and returns the built Context. A fatal command error aborts
the whole load; no partial Context is returned.
"""

import sys
from collections.abc import AsyncIterable, Iterable
from pathlib import Path
from typing import TextIO

from magickscript.core.types import ImageLoader
from magickscript.exceptions import ScriptDecodeError
from magickscript.imaging.image import from_file as image_from_file
from magickscript.parsing.tokenizer import (
    DEFAULT_CHUNK_SIZE,
    ScriptRecord,
    atokenize,
    decode_chunks,
    read_chunks,
    tokenize,
)
from magickscript.structure.builder import ContextFactory
from magickscript.structure.context import Context


def from_records(
    records: Iterable[ScriptRecord], loader: ImageLoader = image_from_file
) -> Context:
    """
    Build a Context from already tokenized records.

    Raises:
        MagickScriptError: If a command is malformed, with its line attached
    """
    factory = ContextFactory()
    for record in records:
        factory.run(record.command, record.args, line=record.line)
    return factory.build(loader)


def from_chunks(
    chunks: Iterable[str], loader: ImageLoader = image_from_file
) -> Context:
    """Build a Context from text chunks split at arbitrary offsets."""
    return from_records(tokenize(chunks), loader)


def from_text(text: str, loader: ImageLoader = image_from_file) -> Context:
    return from_chunks([text], loader)


def from_bytes(
    chunks: Iterable[bytes],
    encoding: str = "utf-8",
    loader: ImageLoader = image_from_file,
) -> Context:
    """
    Build a Context from byte chunks, decoded incrementally.

    Raises:
        ScriptDecodeError: If the bytes are not valid in ``encoding``
    """
    try:
        return from_chunks(decode_chunks(chunks, encoding), loader)
    except UnicodeDecodeError as e:
        raise ScriptDecodeError(encoding, str(e)) from e


def from_stream(
    stream: TextIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    loader: ImageLoader = image_from_file,
) -> Context:
    """
    Build a Context from a text stream read ``chunk_size`` characters at a time.

    Raises:
        ScriptDecodeError: If the stream cannot decode its underlying bytes
    """
    try:
        return from_chunks(read_chunks(stream, chunk_size), loader)
    except UnicodeDecodeError as e:
        raise ScriptDecodeError(e.encoding, str(e)) from e


def from_file(
    path: str | Path,
    encoding: str = "utf-8",
    loader: ImageLoader = image_from_file,
) -> Context:
    """
    Build a Context from a script file.

    Raises:
        OSError: If the file cannot be opened
        MagickScriptError: If a command is malformed
        ScriptDecodeError: If the file is not valid in ``encoding``
    """
    with open(path, encoding=encoding) as stream:
        return from_stream(stream, loader=loader)


def from_stdin(loader: ImageLoader = image_from_file) -> Context:
    return from_stream(sys.stdin, loader=loader)


async def afrom_chunks(
    chunks: AsyncIterable[str], loader: ImageLoader = image_from_file
) -> Context:
    """Build a Context from an asynchronous source of text chunks."""
    factory = ContextFactory()
    async for record in atokenize(chunks):
        factory.run(record.command, record.args, line=record.line)
    return factory.build(loader)
