import pytest

from pdf_summary.chunk import Tokenizer


class ByteEncoding:
    """Deterministic stand-in for a tiktoken Encoding: one token per UTF-8 byte."""

    name = "bytes"

    def encode_ordinary(self, text):
        return list(text.encode("utf-8"))

    def decode(self, tokens, errors="replace"):
        return bytes(tokens).decode("utf-8", errors=errors)


@pytest.fixture
def tokenizer():
    return Tokenizer(ByteEncoding())
