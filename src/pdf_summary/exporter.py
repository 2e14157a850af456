from pdf_summary.log import get_logger

logger = get_logger(__name__)


def write_summary(summary: str, out_path: str) -> str:
    """
    Writes the summary as plain UTF-8 text, replacing any existing file.

    Args:
        summary (str): The final summary.
        out_path (str): Destination file. Its directory must already exist.

    Returns:
        str: The output path.

    Raises:
        OSError: If the path is not writable.
    """
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(summary)

    logger.info("summary written to %s", out_path)
    return out_path
