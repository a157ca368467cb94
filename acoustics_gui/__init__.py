"""
Acoustics GUI - presentation components for acoustic prediction results.

Frequency range information views, dithering and SPL range tool windows,
and PDF export of the displayed information.
"""

__version__ = "1.0.0"
