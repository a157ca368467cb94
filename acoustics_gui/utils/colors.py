"""
Color helpers for themed information views.
"""

from PySide6.QtGui import QColor


# Perceived brightness above which dark text reads better
BRIGHTNESS_THRESHOLD = 0.5


def perceived_brightness(color: QColor) -> float:
    """Perceived brightness (0..1) using the YIQ luma weights."""
    return (
        0.299 * color.redF()
        + 0.587 * color.greenF()
        + 0.114 * color.blueF()
    )


def foreground_from_background(background: QColor) -> QColor:
    """
    Pick a contrasting text color for a background.
    
    Returns:
        Black for light backgrounds, white for dark ones
    """
    if perceived_brightness(background) >= BRIGHTNESS_THRESHOLD:
        return QColor(0, 0, 0)
    return QColor(255, 255, 255)
