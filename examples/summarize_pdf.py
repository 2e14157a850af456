"""
Example script: Programmatic PDF summarization using pdf_summary components.
This script demonstrates how to chain the components manually.
"""

from pdf_summary.chunk import Tokenizer
from pdf_summary.config import load_settings
from pdf_summary.exporter import write_summary
from pdf_summary.ingest import extract_text
from pdf_summary.llm_adapter import OpenAIChatAdapter
from pdf_summary.log import configure_logging
from pdf_summary.summarize import Summarizer


def run_example(pdf_path: str, out_path: str):
    print(f"--- Processing {pdf_path} ---")

    # 1. Configuration (OPENAI_API_KEY must be set, e.g. in .env)
    settings = load_settings()
    configure_logging(settings.log_level)

    # 2. Extract
    print("Extracting text...")
    text = extract_text(pdf_path)

    # 3. Summarize window by window
    print("Summarizing...")
    summarizer = Summarizer(
        client=OpenAIChatAdapter.from_settings(settings),
        tokenizer=Tokenizer.for_model(settings.model),
        model=settings.model,
        max_tokens=settings.max_tokens,
    )
    summary = summarizer.summarize(text)

    # 4. Write
    write_summary(summary, out_path)
    print(f"\n--- Summary written to {out_path} ---\n")
    print(summary)


if __name__ == "__main__":
    import sys

    path = sys.argv[1] if len(sys.argv) > 1 else "sample.pdf"
    out = sys.argv[2] if len(sys.argv) > 2 else "summary.txt"
    try:
        run_example(path, out)
    except Exception as e:
        print(f"Note: Could not run example: {e}")
        print("Usage: python examples/summarize_pdf.py path/to/your.pdf [summary.txt]")
