"""
magickscript parsing components.

This package provides the streaming tokenizer that turns script text into
command records.
"""

from magickscript.parsing.tokenizer import (
    ScriptRecord,
    ScriptTokenizer,
    atokenize,
    decode_chunks,
    read_chunks,
    tokenize,
)

__all__ = [
    "ScriptRecord",
    "ScriptTokenizer",
    "atokenize",
    "decode_chunks",
    "read_chunks",
    "tokenize",
]
