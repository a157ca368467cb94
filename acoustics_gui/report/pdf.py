"""
PDF report writing.

Renders information rows (e.g. the frequency range lines) into a
borderless single-column table on a QPdfWriter page. Coordinates are in
points: the writer runs at 72 dpi.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Union

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QFont, QFontMetricsF, QPageSize, QPainter, QPdfWriter


logger = logging.getLogger(__name__)


PDF_RESOLUTION = 72


def _title_font() -> QFont:
    font = QFont("Helvetica", 14)
    font.setBold(True)
    return font


@dataclass
class PdfFonts:
    """Fonts and spacing for report tables."""
    title_font: QFont = field(default_factory=_title_font)
    table_font: QFont = field(default_factory=lambda: QFont("Helvetica", 10))
    row_padding: float = 2.0      # Extra height per row, points
    table_spacing: float = 12.0   # Gap after each table, points


def write_information_table(
    painter: QPainter,
    initial_point: QPointF,
    fonts: PdfFonts,
    align: Qt.AlignmentFlag,
    information: Sequence[str],
    column_width: Optional[float] = None,
) -> QPointF:
    """
    Write a borderless single-column table, one row per string.
    
    Args:
        painter: Active painter on the report page
        initial_point: Top-left corner of the table
        fonts: Table font and spacing
        align: Horizontal alignment of each row within the column
        information: Row texts, top to bottom
        column_width: Column width in points (default: widest row)
        
    Returns:
        Point below the table (plus table spacing) for the next write
    """
    if not information:
        return QPointF(initial_point)
    
    painter.save()
    painter.setFont(fonts.table_font)
    metrics = QFontMetricsF(fonts.table_font, painter.device())
    row_height = metrics.height() + fonts.row_padding
    
    if column_width is None:
        column_width = max(metrics.horizontalAdvance(text) for text in information)
    
    y = initial_point.y()
    for text in information:
        rect = QRectF(initial_point.x(), y, column_width, row_height)
        painter.drawText(rect, align | Qt.AlignmentFlag.AlignVCenter, text)
        y += row_height
    painter.restore()
    
    return QPointF(initial_point.x(), y + fonts.table_spacing)


class PdfReport:
    """
    Single-page PDF report.
    
    Usage:
        with PdfReport("report.pdf", "Prediction Summary") as report:
            report.cursor = pane.export_to_pdf(
                report.painter, report.cursor, report.fonts
            )
    """
    
    def __init__(
        self,
        path: Union[str, Path],
        title: str,
        fonts: Optional[PdfFonts] = None,
        margin: float = 36.0,
    ):
        self.path = Path(path)
        self.title = title
        self.fonts = fonts if fonts is not None else PdfFonts()
        self.margin = margin
        
        self.writer: Optional[QPdfWriter] = None
        self.painter: Optional[QPainter] = None
        self.cursor = QPointF(margin, margin)
    
    @property
    def content_width(self) -> float:
        """Usable page width between the margins, in points."""
        return self.writer.width() - 2 * self.margin
    
    def __enter__(self) -> "PdfReport":
        self.writer = QPdfWriter(str(self.path))
        self.writer.setPageSize(QPageSize(QPageSize.PageSizeId.A4))
        self.writer.setResolution(PDF_RESOLUTION)
        self.writer.setTitle(self.title)
        
        self.painter = QPainter()
        if not self.painter.begin(self.writer):
            raise OSError(f"Cannot open PDF for writing: {self.path}")
        
        self._write_title()
        return self
    
    def __exit__(self, exc_type, exc, tb):
        self.painter.end()
        if exc_type is None:
            logger.info("PDF report written to %s", self.path)
        return False
    
    def _write_title(self):
        metrics = QFontMetricsF(self.fonts.title_font, self.writer)
        self.painter.setFont(self.fonts.title_font)
        self.painter.drawText(
            QPointF(self.cursor.x(), self.cursor.y() + metrics.ascent()),
            self.title,
        )
        self.cursor = QPointF(
            self.cursor.x(),
            self.cursor.y() + metrics.height() + self.fonts.table_spacing,
        )
    
    def write_information(
        self,
        information: Sequence[str],
        align: Qt.AlignmentFlag = Qt.AlignmentFlag.AlignLeft,
    ) -> QPointF:
        """Write rows at the cursor and advance it."""
        self.cursor = write_information_table(
            self.painter,
            self.cursor,
            self.fonts,
            align,
            information,
            column_width=self.content_width,
        )
        return self.cursor
