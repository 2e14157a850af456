"""
Exceptions raised by pdf_summary.

Every failure is fatal for the current run: nothing here is retried or
recovered locally, callers see the error and no summary is written.
"""


class SummaryError(Exception):
    """Base class for all pdf_summary errors."""
    pass


class ConfigurationError(SummaryError):
    """Missing credential, model identifier or tokenizer encoding."""
    pass


class EmptyInputError(SummaryError):
    """The document text (or its token sequence) is empty."""
    pass


class NoTokensError(SummaryError):
    """Tokenization produced zero windows."""
    pass


class CompletionRequestError(SummaryError):
    """The remote completion call failed (network, auth, rate limit, bad response)."""
    pass


class NoSummaryProducedError(SummaryError):
    """The completion call succeeded but returned no choices."""
    pass


class ExtractionError(SummaryError):
    """The input document could not be read or parsed."""
    pass
