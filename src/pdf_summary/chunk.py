"""
Token-based chunking for summarization.

A document is encoded with the completion model's own encoding so window sizes
match the model's token accounting. Windows partition the token sequence
left-to-right without overlap; continuity across window boundaries comes from
short context slices taken from the neighbouring windows.
"""

from typing import Iterable, List, Sequence, Tuple

from pdf_summary.errors import ConfigurationError, EmptyInputError, NoTokensError

CHUNK_SIZE = 2000
CONTEXT_SIZE = 50

TokenSequence = Tuple[int, ...]


class Tokenizer:
    """
    Thin wrapper around a tiktoken ``Encoding``.

    Any object exposing ``encode_ordinary(text)`` and ``decode(tokens, errors=...)``
    can be used as the encoding.
    """

    def __init__(self, encoding):
        self.encoding = encoding

    @classmethod
    def for_model(cls, model: str) -> "Tokenizer":
        """
        Resolves the encoding used by a completion model.

        Args:
            model (str): Model identifier, e.g. "gpt-3.5-turbo".

        Returns:
            Tokenizer: Tokenizer bound to the model's encoding.

        Raises:
            ConfigurationError: If tiktoken knows no encoding for the model.
        """
        import tiktoken

        try:
            encoding = tiktoken.encoding_for_model(model)
        except KeyError as err:
            raise ConfigurationError(f"No token encoding found for model {model!r}") from err
        return cls(encoding)

    @property
    def name(self) -> str:
        return getattr(self.encoding, "name", type(self.encoding).__name__)

    def tokenize(self, text: str) -> TokenSequence:
        """
        Encodes text into an immutable token sequence.

        Special-token markers in the text are encoded as plain text.

        Raises:
            EmptyInputError: If text is empty.
        """
        if not text:
            raise EmptyInputError("nothing to summarize: input text is empty")
        return tuple(self.encoding.encode_ordinary(text))

    def decode(self, tokens: Iterable[int]) -> str:
        """
        Decodes tokens back to text.

        A slice may cut through a multi-byte character; incomplete byte
        sequences are replaced with U+FFFD instead of raising.
        """
        return self.encoding.decode(list(tokens), errors="replace")


def partition(tokens: Sequence[int], chunk_size: int = CHUNK_SIZE) -> List[TokenSequence]:
    """
    Splits a token sequence into consecutive windows of at most ``chunk_size`` tokens.

    Args:
        tokens: The full document token sequence.
        chunk_size: Maximum window length. The last window may be shorter.

    Returns:
        List of windows in document order, covering ``tokens`` exactly.

    Raises:
        ValueError: If chunk_size is not positive.
        NoTokensError: If there are no tokens to partition.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    windows = [tuple(tokens[start : start + chunk_size]) for start in range(0, len(tokens), chunk_size)]
    if not windows:
        raise NoTokensError("no tokens found for input text")
    return windows


def context_slice(window: Sequence[int], end: str, size: int = CONTEXT_SIZE) -> TokenSequence:
    """
    Returns the first ("head") or last ("tail") ``size`` tokens of a window.

    Windows shorter than ``size`` are returned whole.

    Raises:
        ValueError: On a negative size or an unknown end.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    size = min(size, len(window))

    if end == "head":
        return tuple(window[:size])
    if end == "tail":
        return tuple(window[len(window) - size :])
    raise ValueError(f"end must be 'head' or 'tail', got {end!r}")
