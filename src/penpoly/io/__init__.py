"""fontTools I/O layer for penpoly.

This module connects penpoly paths to fontTools. It provides a clean
abstraction layer between fontTools pens and the domain models.

Key responsibilities:
- Record pen drawing calls into Path values
- Replay Path values onto any fontTools pen
- Load TTF/OTF fonts and read glyph outlines as paths

Key classes:
- PathEventPen: Pen recording path commands
- FontReader: Load fonts and extract glyph paths
"""

from penpoly.io.pen import PathEventPen, draw_path, recording_to_path
from penpoly.io.reader import FontReader

__all__ = [
    "FontReader",
    "PathEventPen",
    "draw_path",
    "recording_to_path",
]
