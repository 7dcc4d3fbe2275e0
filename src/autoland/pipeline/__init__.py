"""End-to-end processing of report PDFs and batch cost accounting."""

from autoland.pipeline.metrics import calculate_cost_savings
from autoland.pipeline.processor import process_pdf, process_pdf_file

__all__ = [
    "process_pdf",
    "process_pdf_file",
    "calculate_cost_savings",
]
