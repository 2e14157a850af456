import os
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from pdf_summary.cli import cli

ENV = {
    "OPENAI_API_KEY": "test-key",
    "OPENAI_MODEL": None,
    "OPENAI_API_URL": "http://mock-api.com",
    "HTTP_PROXY": None,
    "TOKEN_LIMIT": None,
    "REQUEST_TIMEOUT": None,
    "LOG_LEVEL": "WARNING",
}


@pytest.fixture
def mock_tokenizer(tokenizer):
    with patch("pdf_summary.chunk.Tokenizer.for_model", return_value=tokenizer) as for_model:
        yield for_model


def chat_response(content):
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}
    return response


def write_file(name, content):
    with open(name, "w", encoding="utf-8") as f:
        f.write(content)


def test_extract_cli():
    runner = CliRunner()
    with runner.isolated_filesystem():
        write_file("doc.txt", "Hello world from CLI.")

        result = runner.invoke(cli, ["extract", "-i", "doc.txt"])

        assert result.exit_code == 0
        assert "Hello world from CLI." in result.output


def test_tokens_cli(mock_tokenizer):
    runner = CliRunner()
    with runner.isolated_filesystem():
        write_file("doc.txt", "x" * 4500)

        result = runner.invoke(cli, ["tokens", "-i", "doc.txt", "--model", "gpt-4"], env=ENV)

        assert result.exit_code == 0
        assert "4500 tokens, 3 window(s)" in result.output
        mock_tokenizer.assert_called_once_with("gpt-4")


def test_tokens_cli_reads_env_file(mock_tokenizer):
    runner = CliRunner()
    with runner.isolated_filesystem():
        write_file("doc.txt", "x" * 10)
        write_file(".env", "OPENAI_MODEL=gpt-4\n")

        result = runner.invoke(cli, ["tokens", "-i", "doc.txt"], env=ENV)

        assert result.exit_code == 0, result.output
        mock_tokenizer.assert_called_once_with("gpt-4")


@patch("requests.post")
def test_summarize_cli_writes_file(mock_post, mock_tokenizer):
    mock_post.side_effect = [chat_response("Part one."), chat_response("Part two.")]
    runner = CliRunner()
    with runner.isolated_filesystem():
        write_file("doc.txt", "a" * 2500)

        result = runner.invoke(cli, ["summarize", "-i", "doc.txt", "-o", "summary.txt"], env=ENV)

        assert result.exit_code == 0, result.output
        with open("summary.txt", encoding="utf-8") as f:
            assert f.read() == "Part one.\nPart two."

    assert mock_post.call_count == 2
    assert mock_post.call_args.kwargs["json"]["model"] == "gpt-3.5-turbo"
    mock_tokenizer.assert_called_once_with("gpt-3.5-turbo")


@patch("requests.post")
def test_summarize_cli_no_save(mock_post, mock_tokenizer):
    mock_post.return_value = chat_response("Short summary.")
    runner = CliRunner()
    with runner.isolated_filesystem():
        write_file("doc.txt", "This is a document that needs summarization.")

        result = runner.invoke(cli, ["summarize", "-i", "doc.txt", "--no-save", "--model", "gpt-4"], env=ENV)

        assert result.exit_code == 0, result.output
        assert "Short summary." in result.output
        assert not os.path.exists("summary.txt")

    assert mock_post.call_args.kwargs["json"]["model"] == "gpt-4"


@patch("requests.post")
def test_summarize_cli_failure_writes_nothing(mock_post, mock_tokenizer):
    mock_post.return_value = MagicMock(status_code=200, json=MagicMock(return_value={"choices": []}))
    runner = CliRunner()
    with runner.isolated_filesystem():
        write_file("doc.txt", "Some content.")

        result = runner.invoke(cli, ["summarize", "-i", "doc.txt", "-o", "summary.txt"], env=ENV)

        assert result.exit_code == 1
        assert "no summary found" in result.output
        assert not os.path.exists("summary.txt")


@patch("requests.post")
def test_summarize_cli_missing_api_key(mock_post, mock_tokenizer):
    runner = CliRunner()
    with runner.isolated_filesystem():
        write_file("doc.txt", "Some content.")

        result = runner.invoke(
            cli, ["summarize", "-i", "doc.txt", "-o", "summary.txt"], env=dict(ENV, OPENAI_API_KEY=None)
        )

        assert result.exit_code == 1
        assert "OPENAI_API_KEY is missing" in result.output
    mock_post.assert_not_called()


def test_summarize_cli_requires_out():
    runner = CliRunner()
    with runner.isolated_filesystem():
        write_file("doc.txt", "Some content.")

        result = runner.invoke(cli, ["summarize", "-i", "doc.txt"], env=ENV)

        assert result.exit_code == 2


def test_cli_error_handling():
    runner = CliRunner()
    # Missing file
    result = runner.invoke(cli, ["extract", "-i", "non_existent_file.txt"])
    assert result.exit_code == 2  # Click default for bad path
