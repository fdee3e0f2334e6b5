"""
Drawing surface for marketing designs.

Layouts are written in design units (the on-screen size of the material); the
canvas multiplies every coordinate and font size by the export scale.
"""

from functools import lru_cache
from typing import List, Optional, Sequence, Tuple, Union
from PIL import Image, ImageColor, ImageDraw, ImageFont
import logging
import math

logger = logging.getLogger(__name__)

Color = Union[str, Tuple[int, int, int]]
Box = Tuple[float, float, float, float]

FontType = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def to_rgb(color: Color) -> Tuple[int, int, int]:
    """Convert a CSS colour string or RGB tuple to an RGB tuple."""
    if isinstance(color, tuple):
        return color[:3]
    return ImageColor.getrgb(color)[:3]


@lru_cache(maxsize=64)
def load_font(size: int, bold: bool = False,
              regular_path: Optional[str] = None,
              bold_path: Optional[str] = None) -> FontType:
    """
    Load a font at a pixel size.

    Args:
        size: Font size in pixels
        bold: Use the bold face when one is configured
        regular_path: Optional TrueType file for regular text
        bold_path: Optional TrueType file for bold text

    Returns:
        A Pillow font; Pillow's bundled font when no file is configured
    """
    path = bold_path if bold and bold_path else regular_path
    if path:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            logger.warning(f"Could not load font {path}; using the built-in font")
    return ImageFont.load_default(size=size)


class Canvas:
    """
    RGBA image with scaled drawing helpers.
    """

    def __init__(
        self,
        width: int,
        height: int,
        scale: int = 1,
        background: Color = "#ffffff",
        font_path: Optional[str] = None,
        bold_font_path: Optional[str] = None
    ):
        self.width = width
        self.height = height
        self.scale = scale
        self.font_path = font_path
        self.bold_font_path = bold_font_path
        self.image = Image.new("RGBA", (self.px(width), self.px(height)), to_rgb(background) + (255,))
        self.draw = ImageDraw.Draw(self.image)

    @property
    def pixel_size(self) -> Tuple[int, int]:
        return self.image.size

    def px(self, value: float) -> int:
        return int(round(value * self.scale))

    def _box(self, box: Box) -> Tuple[int, int, int, int]:
        x0, y0, x1, y1 = box
        return self.px(x0), self.px(y0), self.px(x1), self.px(y1)

    def font(self, size: float, bold: bool = False) -> FontType:
        return load_font(max(1, self.px(size)), bold, self.font_path, self.bold_font_path)

    def _stroke(self, size: float, bold: bool) -> int:
        # Without a bold face, thicken the regular one
        if bold and not self.bold_font_path:
            return max(1, self.px(size) // 28)
        return 0

    # Shapes

    def rect(self, box: Box, fill: Color, radius: float = 0, opacity: float = 1.0) -> None:
        """Filled rectangle; opacity below 1 blends it over what is already drawn."""
        rgb = to_rgb(fill)
        x0, y0, x1, y1 = self._box(box)
        if opacity >= 1.0:
            if radius:
                self.draw.rounded_rectangle((x0, y0, x1, y1), radius=self.px(radius), fill=rgb)
            else:
                self.draw.rectangle((x0, y0, x1, y1), fill=rgb)
            return

        overlay = Image.new("RGBA", (max(1, x1 - x0), max(1, y1 - y0)), (0, 0, 0, 0))
        overlay_draw = ImageDraw.Draw(overlay)
        alpha = int(round(255 * max(0.0, opacity)))
        overlay_box = (0, 0, overlay.width - 1, overlay.height - 1)
        if radius:
            overlay_draw.rounded_rectangle(overlay_box, radius=self.px(radius), fill=rgb + (alpha,))
        else:
            overlay_draw.rectangle(overlay_box, fill=rgb + (alpha,))
        self.image.alpha_composite(overlay, dest=(x0, y0))

    def gradient(self, box: Box, start: Color, end: Color, direction: str = "vertical") -> None:
        """
        Linear gradient inside a box.

        Args:
            box: Area to fill
            start: Colour at the top (or top-left for diagonal)
            end: Colour at the bottom (or bottom-right for diagonal)
            direction: "vertical" or "diagonal"
        """
        x0, y0, x1, y1 = self._box(box)
        size = (max(1, x1 - x0), max(1, y1 - y0))

        vertical = Image.linear_gradient("L")
        if direction == "diagonal":
            mask = Image.blend(vertical.rotate(90), vertical, 0.5)
        else:
            mask = vertical
        mask = mask.resize(size)

        start_layer = Image.new("RGBA", size, to_rgb(start) + (255,))
        end_layer = Image.new("RGBA", size, to_rgb(end) + (255,))
        self.image.paste(Image.composite(end_layer, start_layer, mask), (x0, y0))

    def circle(self, center: Tuple[float, float], radius: float, fill: Color) -> None:
        cx, cy = center
        self.draw.ellipse(self._box((cx - radius, cy - radius, cx + radius, cy + radius)), fill=to_rgb(fill))

    def line(self, points: Sequence[Tuple[float, float]], fill: Color, width: float = 1) -> None:
        self.draw.line([(self.px(x), self.px(y)) for x, y in points], fill=to_rgb(fill),
                       width=max(1, self.px(width)), joint="curve")

    def star(self, center: Tuple[float, float], radius: float, fill: Color) -> None:
        """Five-pointed star."""
        cx, cy = center
        points = []
        for i in range(10):
            r = radius if i % 2 == 0 else radius * 0.45
            angle = math.pi / 2 + i * math.pi / 5
            points.append((self.px(cx + r * math.cos(angle)), self.px(cy - r * math.sin(angle))))
        self.draw.polygon(points, fill=to_rgb(fill))

    def check(self, x: float, y: float, size: float, fill: Color) -> None:
        """Tick mark whose bounding box starts at (x, y)."""
        self.line(
            [(x, y + size * 0.55), (x + size * 0.38, y + size * 0.9), (x + size, y + size * 0.15)],
            fill, width=max(1.0, size / 6)
        )

    # Text

    def text_width(self, text: str, size: float, bold: bool = False) -> float:
        """Rendered width of a single line, in design units."""
        pixels = self.draw.textlength(text, font=self.font(size, bold))
        return pixels / self.scale + 2 * self._stroke(size, bold) / self.scale

    def text(
        self,
        x: float,
        y: float,
        text: str,
        size: float,
        fill: Color,
        bold: bool = False,
        align: str = "left"
    ) -> float:
        """
        Draw a single line of text.

        Args:
            x: Left edge, centre or right edge depending on align
            y: Top of the line
            align: "left", "center" or "right"

        Returns:
            Line height in design units
        """
        anchor = {"left": "la", "center": "ma", "right": "ra"}[align]
        stroke = self._stroke(size, bold)
        rgb = to_rgb(fill)
        self.draw.text(
            (self.px(x), self.px(y)), text, font=self.font(size, bold), fill=rgb,
            anchor=anchor, stroke_width=stroke, stroke_fill=rgb
        )
        return size

    def wrap(self, text: str, size: float, max_width: float, bold: bool = False) -> List[str]:
        return wrap_text(text, max_width, lambda s: self.text_width(s, size, bold))

    def paragraph(
        self,
        x: float,
        y: float,
        width: float,
        text: str,
        size: float,
        fill: Color,
        bold: bool = False,
        align: str = "left",
        line_height: float = 1.35,
        max_lines: Optional[int] = None
    ) -> float:
        """
        Draw word-wrapped text inside a column.

        Args:
            x: Left edge of the column
            y: Top of the first line
            width: Column width used for wrapping and alignment

        Returns:
            The y coordinate below the last line
        """
        lines = self.wrap(text, size, width, bold)
        if max_lines is not None and len(lines) > max_lines:
            lines = lines[:max_lines]
            lines[-1] = lines[-1].rstrip(" .,") + "..."

        anchor_x = {"left": x, "center": x + width / 2, "right": x + width}[align]
        for line in lines:
            self.text(anchor_x, y, line, size, fill, bold=bold, align=align)
            y += size * line_height
        return y


def wrap_text(text: str, max_width: float, measure) -> List[str]:
    """
    Greedy word wrap.

    Args:
        text: Text to wrap; explicit newlines start new lines
        max_width: Available width
        measure: Callable returning the width of a string

    Returns:
        Lines that fit the width; a single word wider than the column is broken
        between characters
    """
    lines: List[str] = []
    for raw_line in text.splitlines() or [""]:
        words = raw_line.split()
        if not words:
            lines.append("")
            continue

        current = ""
        for word in words:
            candidate = f"{current} {word}" if current else word
            if measure(candidate) <= max_width:
                current = candidate
                continue

            if current:
                lines.append(current)
                current = ""

            while measure(word) > max_width and len(word) > 1:
                cut = len(word) - 1
                while cut > 1 and measure(word[:cut]) > max_width:
                    cut -= 1
                lines.append(word[:cut])
                word = word[cut:]
            current = word

        if current:
            lines.append(current)
    return lines
