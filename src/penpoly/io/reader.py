"""Font reader for loading glyph outlines as paths.

This module provides the FontReader class for loading font files
and recording glyph outlines into penpoly Path values.
"""

from pathlib import Path

from fontTools.ttLib import TTFont

from penpoly.domain import Path as GlyphPath
from penpoly.exceptions import FontLoadError, GlyphNotFoundError
from penpoly.io.pen import PathEventPen


class FontReader:
    """Loads TTF/OTF fonts and records glyph outlines.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            path = reader.get_path("O")
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If the file cannot be parsed as a font
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            self._font = TTFont(str(self._font_path))
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _loaded(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for CFF-flavoured fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._loaded()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._loaded()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._loaded()["maxp"].numGlyphs

    @property
    def glyph_names(self) -> list[str]:
        """Return glyph names in glyph order."""
        return list(self._loaded().getGlyphOrder())

    def resolve(self, name: str) -> str:
        """Resolve a glyph name or a single character to a glyph name.

        Args:
            name: Glyph name, or one character looked up in the cmap

        Returns:
            Glyph name present in the font

        Raises:
            GlyphNotFoundError: If neither lookup succeeds
        """
        font = self._loaded()
        if name in font.getGlyphOrder():
            return name

        if len(name) == 1:
            cmap = font.getBestCmap() or {}
            glyph_name = cmap.get(ord(name))
            if glyph_name is not None:
                return glyph_name

        raise GlyphNotFoundError(name)

    def get_path(self, name: str) -> GlyphPath:
        """Record a glyph outline as a path.

        Composite glyphs are decomposed into their components' outlines.

        Args:
            name: Glyph name or single character

        Returns:
            Path of the glyph outline, empty for blank glyphs

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If the glyph does not exist
        """
        glyph_name = self.resolve(name)
        glyph_set = self._loaded().getGlyphSet()

        pen = PathEventPen(glyph_set)
        glyph_set[glyph_name].draw(pen)
        return pen.path

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
