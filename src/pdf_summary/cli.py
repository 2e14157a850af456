import os
import sys

import click

from pdf_summary.errors import SummaryError

FATAL_ERRORS = (SummaryError, OSError, ValueError)


@click.group()
def cli():
    """pdf-summary: summarize PDF documents with a chat completion model."""
    pass


@click.command()
@click.option("--input", "-i", required=True, type=click.Path(exists=True), help="Path to input file.")
def extract(input):
    """Extract text from a file."""
    from pdf_summary.ingest import extract_text

    try:
        click.echo(extract_text(input))
    except FATAL_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.option("--input", "-i", required=True, type=click.Path(exists=True), help="Path to input file.")
@click.option("--model", help="Model whose encoding is used for counting.")
@click.option("--env-file", type=click.Path(exists=True, dir_okay=False), help="Explicit .env file.")
def tokens(input, model, env_file):
    """Count tokens and windows without calling the API."""
    from pdf_summary.chunk import CHUNK_SIZE, Tokenizer, partition
    from pdf_summary.config import DEFAULT_MODEL, load_env
    from pdf_summary.ingest import extract_text

    try:
        load_env(env_file)
        tokenizer = Tokenizer.for_model(model or os.environ.get("OPENAI_MODEL") or DEFAULT_MODEL)
        token_seq = tokenizer.tokenize(extract_text(input))
        windows = partition(token_seq, CHUNK_SIZE)
        click.echo(f"{len(token_seq)} tokens, {len(windows)} window(s) ({tokenizer.name})")
    except FATAL_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.option("--input", "-i", "pdf_file", required=True, type=click.Path(exists=True), help="PDF file to summarize.")
@click.option("--out", "-o", "summary_file", type=click.Path(), help="Summary file to write to.")
@click.option("--model", help="Chat completion model (overrides OPENAI_MODEL).")
@click.option("--env-file", type=click.Path(exists=True, dir_okay=False), help="Explicit .env file.")
@click.option("--log-level", help="Log level (overrides LOG_LEVEL).")
@click.option("--no-save", is_flag=True, help="Print the summary to stdout instead of saving it.")
def summarize(pdf_file, summary_file, model, env_file, log_level, no_save):
    """Extract, summarize and save a document."""
    from pdf_summary.chunk import Tokenizer
    from pdf_summary.config import load_settings
    from pdf_summary.exporter import write_summary
    from pdf_summary.ingest import extract_text
    from pdf_summary.llm_adapter import OpenAIChatAdapter
    from pdf_summary.log import configure_logging
    from pdf_summary.summarize import Summarizer

    if not no_save and not summary_file:
        raise click.UsageError("--out is required unless --no-save is given.")

    try:
        settings = load_settings(env_file=env_file, model=model)
        configure_logging(log_level or settings.log_level)

        summarizer = Summarizer(
            client=OpenAIChatAdapter.from_settings(settings),
            tokenizer=Tokenizer.for_model(settings.model),
            model=settings.model,
            max_tokens=settings.max_tokens,
        )

        text = extract_text(pdf_file)
        summary = summarizer.summarize(text)

        if no_save:
            click.echo(summary)
        else:
            write_summary(summary, summary_file)
            click.echo(f"Summary written to {summary_file}")
    except FATAL_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main():
    cli()


cli.add_command(extract)
cli.add_command(tokens)
cli.add_command(summarize)


if __name__ == "__main__":
    main()
