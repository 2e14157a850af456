import os
import re
from typing import Any, Dict, List

from pdf_summary.errors import ExtractionError
from pdf_summary.log import get_logger

logger = get_logger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt")


def extract_pages(path: str) -> List[Dict[str, Any]]:
    """
    Extracts text from each page of a PDF file using pdfplumber.

    Args:
        path (str): Path to the PDF file.

    Returns:
        List[Dict[str, Any]]: A list of dictionaries, each containing 'page' number and 'text'.

    Raises:
        ExtractionError: If the file cannot be opened or parsed as a PDF.
    """
    import pdfplumber

    pages = []
    try:
        with pdfplumber.open(path) as pdf:
            for i, page in enumerate(pdf.pages):
                text = page.extract_text() or ""
                pages.append({"page": i + 1, "text": _clean_extracted_text(text)})
    except Exception as err:
        raise ExtractionError(f"Failed to read PDF {path}: {err}") from err

    logger.debug("extracted %d page(s) from %s", len(pages), path)
    return pages


def _clean_extracted_text(text: str) -> str:
    """
    Clean extracted text by removing page-number artifacts and redundant whitespace.

    Args:
        text: Raw extracted text.

    Returns:
        Cleaned text.
    """
    if not text:
        return ""

    cleaned_lines = []
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            continue

        # Bare page numbers and "Page N" footers.
        if re.match(r"^(page\s*\d+|\d+)$", line, re.IGNORECASE):
            continue

        cleaned_lines.append(re.sub(r"\s+", " ", line))

    return "\n".join(cleaned_lines)


def extract_text_from_pdf(path: str) -> str:
    pages = extract_pages(path)
    return "\n\n".join(p["text"] for p in pages if p["text"])


def extract_text_from_docx(path: str) -> str:
    """
    Extracts paragraph text from a DOCX file using python-docx.

    Raises:
        ExtractionError: If the file is not a readable DOCX document.
    """
    from docx import Document

    try:
        doc = Document(path)
    except Exception as err:
        raise ExtractionError(f"Failed to read DOCX {path}: {err}") from err
    return "\n".join(para.text for para in doc.paragraphs)


def extract_text_from_txt(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as err:
        raise ExtractionError(f"Failed to read text file {path}: {err}") from err


def extract_text(path: str) -> str:
    """
    Main entry point for reading documents. Detects format by extension and routes
    to the matching extractor.

    Args:
        path (str): Path to the file.

    Returns:
        str: The full document text.

    Raises:
        FileNotFoundError: If the path does not exist.
        ValueError: If the extension is not supported.
        ExtractionError: If the document cannot be read.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")

    ext = os.path.splitext(path)[1].lower()
    if ext == ".pdf":
        return extract_text_from_pdf(path)
    elif ext == ".docx":
        return extract_text_from_docx(path)
    elif ext == ".txt":
        return extract_text_from_txt(path)
    else:
        raise ValueError(f"Unsupported file format: {ext}")
