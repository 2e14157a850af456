from pdf_summary.chunk import CHUNK_SIZE, CONTEXT_SIZE, Tokenizer, context_slice, partition
from pdf_summary.config import Settings, load_settings
from pdf_summary.errors import (
    CompletionRequestError,
    ConfigurationError,
    EmptyInputError,
    ExtractionError,
    NoSummaryProducedError,
    NoTokensError,
    SummaryError,
)
from pdf_summary.exporter import write_summary
from pdf_summary.ingest import extract_text
from pdf_summary.llm_adapter import Choice, CompletionClient, OpenAIChatAdapter
from pdf_summary.summarize import Summarizer, build_messages, iter_window_contexts

__all__ = [
    "CHUNK_SIZE",
    "CONTEXT_SIZE",
    "Tokenizer",
    "context_slice",
    "partition",
    "Settings",
    "load_settings",
    "CompletionRequestError",
    "ConfigurationError",
    "EmptyInputError",
    "ExtractionError",
    "NoSummaryProducedError",
    "NoTokensError",
    "SummaryError",
    "write_summary",
    "extract_text",
    "Choice",
    "CompletionClient",
    "OpenAIChatAdapter",
    "Summarizer",
    "build_messages",
    "iter_window_contexts",
]
