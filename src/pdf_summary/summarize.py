"""
Document summarization over token windows with sliding context.

Key Design Decisions:
- Windows are summarized SEQUENTIALLY, in document order
- Each request carries the tail of the previous window and the head of the next
- One completion call per window, no retries: the first failure aborts the run
- Fragments are joined with newlines, no further post-processing
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence

from pdf_summary.chunk import CHUNK_SIZE, CONTEXT_SIZE, Tokenizer, context_slice, partition
from pdf_summary.config import TOKEN_LIMIT
from pdf_summary.errors import CompletionRequestError, EmptyInputError, NoSummaryProducedError
from pdf_summary.llm_adapter import CompletionClient, Message
from pdf_summary.log import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPERATURE = 0.2

SYSTEM_PROMPT = """\
You are an assistant. Your only job is summarize a PDF file. \
File content is provided as text chunks by the user. \
When summarize each chunk, you should consider a few more words from previous chunk \
and a few words from next chunk for better result. \
The following format will be used to send text chunk:

<previous>
`````` // empty OR words from last chunk sent to you, delimited with triple backticks

<current>
`````` // text to summarize this iteration, delimited with triple backticks

<next>
`````` // empty OR words from next chunk will send to you, delimited with triple backticks

The summary should mimic tone of original content, and pay attention to relation between chunks.
Organize summary in paragraphs."""

USER_TEMPLATE = """
<previous>
```{previous}```

<current>
```{current}```

<next>
```{next}```
"""


@dataclass(frozen=True)
class WindowContext:
    """Decoded text blocks sent for one window."""

    index: int
    previous: str
    current: str
    next: str


def build_messages(previous: str, current: str, next: str) -> List[Message]:
    """Builds the system + user message pair for one window."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_TEMPLATE.format(previous=previous, current=current, next=next)},
    ]


def iter_window_contexts(
    tokenizer: Tokenizer, windows: Sequence[Sequence[int]], context_size: int = CONTEXT_SIZE
) -> Iterator[WindowContext]:
    """
    Folds over windows in order, yielding the (previous, current, next) text for each.

    The generator is lazy: window i+1 is only looked at once window i has been
    consumed, so stopping early never decodes later windows.

    Args:
        tokenizer: Tokenizer used to decode token slices.
        windows: Windows from ``partition``, in document order.
        context_size: Number of tokens taken from each neighbouring window.

    Yields:
        WindowContext for each window. The first has an empty ``previous``,
        the last an empty ``next``.
    """
    if not windows:
        return

    previous = ""
    current_window = windows[0]
    current = tokenizer.decode(current_window)

    for index in range(1, len(windows)):
        window = windows[index]
        next_text = tokenizer.decode(context_slice(window, "head", context_size))
        yield WindowContext(index - 1, previous, current, next_text)

        previous = tokenizer.decode(context_slice(current_window, "tail", context_size))
        current_window = window
        current = tokenizer.decode(window)

    yield WindowContext(len(windows) - 1, previous, current, "")


class Summarizer:
    """
    Summarizes whole documents through a completion client.

    Instances hold no per-run state, so one Summarizer can serve concurrent
    calls for different documents.
    """

    def __init__(
        self,
        client: CompletionClient,
        tokenizer: Tokenizer,
        model: str,
        temperature: float = DEFAULT_TEMPERATURE,
        chunk_size: int = CHUNK_SIZE,
        context_size: int = CONTEXT_SIZE,
        max_tokens: int = TOKEN_LIMIT,
    ):
        self.client = client
        self.tokenizer = tokenizer
        self.model = model
        self.temperature = temperature
        self.chunk_size = chunk_size
        self.context_size = context_size
        self.max_tokens = max_tokens

        if chunk_size + 2 * context_size > max_tokens:
            logger.warning(
                "window of %d tokens plus %d context tokens may exceed the %d token budget",
                chunk_size,
                2 * context_size,
                max_tokens,
            )

    def summarize_window(self, previous: str, current: str, next: str) -> str:
        """
        Summarizes one window given its neighbouring context.

        Args:
            previous (str): Tail text of the previous window ("" for the first window).
            current (str): Text of the window to summarize.
            next (str): Head text of the next window ("" for the last window).

        Returns:
            str: Content of the first returned choice. Other choices are ignored.

        Raises:
            CompletionRequestError: If the completion request fails.
            NoSummaryProducedError: If the service returns no choices.
        """
        messages = build_messages(previous, current, next)
        logger.debug("chat prompt: %s", messages[1]["content"])

        try:
            choices = self.client.complete(messages, model=self.model, temperature=self.temperature)
        except CompletionRequestError:
            raise
        except Exception as err:
            raise CompletionRequestError(f"completion request failed: {err}") from err

        if not choices:
            raise NoSummaryProducedError("no summary found.")

        first = choices[0]
        logger.debug("reply %s:\nRole: %s\nContent: %s", first.index, first.role, first.content)
        return first.content

    def summarize(self, full_text: str) -> str:
        """
        Summarizes a whole document.

        Args:
            full_text (str): Complete document text.

        Returns:
            str: Per-window summaries joined by newlines, in document order.

        Raises:
            EmptyInputError: If full_text is empty. No request is sent.
            NoTokensError: If the text produces no windows.
            CompletionRequestError, NoSummaryProducedError: From the first failing window.
        """
        if not full_text:
            raise EmptyInputError("nothing to summarize: input text is empty")

        tokens = self.tokenizer.tokenize(full_text)
        windows = partition(tokens, self.chunk_size)
        logger.info("summarizing %d tokens in %d window(s) with %s", len(tokens), len(windows), self.model)

        fragments = []
        for ctx in iter_window_contexts(self.tokenizer, windows, self.context_size):
            logger.debug("summarizing window %d/%d", ctx.index + 1, len(windows))
            fragments.append(self.summarize_window(ctx.previous, ctx.current, ctx.next))

        return "\n".join(fragments)
