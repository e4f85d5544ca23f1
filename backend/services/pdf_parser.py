import io
import logging

import pdfplumber

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF"
# Readers accept the header anywhere in the first kilobyte
PDF_HEADER_WINDOW = 1024


def looks_like_pdf(data: bytes) -> bool:
    """Cheap signature check before handing bytes to the PDF parser."""
    return PDF_MAGIC in data[:PDF_HEADER_WINDOW]


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file, one page per line block."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    logger.debug("Extracted text from %d PDF pages", len(pages))
    return "\n".join(pages).strip()
