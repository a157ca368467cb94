"""
Report module - PDF export of displayed information.
"""

from .pdf import PdfFonts, PdfReport, write_information_table

__all__ = ["PdfFonts", "PdfReport", "write_information_table"]
