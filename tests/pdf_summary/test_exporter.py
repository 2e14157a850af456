import os
import tempfile

import pytest

from pdf_summary.exporter import write_summary


def test_write_summary():
    with tempfile.TemporaryDirectory() as tmpdir:
        out_path = os.path.join(tmpdir, "summary.txt")

        result = write_summary("First part.\nSecond part – über.", out_path)

        assert result == out_path
        with open(out_path, encoding="utf-8") as f:
            assert f.read() == "First part.\nSecond part – über."


def test_write_summary_overwrites():
    with tempfile.TemporaryDirectory() as tmpdir:
        out_path = os.path.join(tmpdir, "summary.txt")
        with open(out_path, "w") as f:
            f.write("old content that is longer than the new one")

        write_summary("new", out_path)

        with open(out_path) as f:
            assert f.read() == "new"


def test_write_summary_unwritable_path():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(OSError):
            write_summary("text", os.path.join(tmpdir, "missing", "summary.txt"))
