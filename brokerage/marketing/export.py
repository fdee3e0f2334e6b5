"""
Encoders for rendered designs: PNG, JPEG, single-page PDF and a ZIP of all three.
"""

from dataclasses import dataclass
from io import BytesIO
from PIL import Image
import logging
import zipfile

from brokerage.schemas.marketing import ExportFormat

logger = logging.getLogger(__name__)

JPEG_QUALITY = 95

MEDIA_TYPES = {
    ExportFormat.PNG: "image/png",
    ExportFormat.JPG: "image/jpeg",
    ExportFormat.PDF: "application/pdf",
    ExportFormat.ZIP: "application/zip",
}


@dataclass
class ExportedFile:
    content: bytes
    filename: str
    media_type: str


def flatten(image: Image.Image, background=(255, 255, 255)) -> Image.Image:
    """Composite an image with transparency onto a solid background."""
    if image.mode == "RGB":
        return image
    rgba = image.convert("RGBA")
    flat = Image.new("RGB", rgba.size, background)
    flat.paste(rgba, mask=rgba.getchannel("A"))
    return flat


def to_png(image: Image.Image) -> bytes:
    buffer = BytesIO()
    image.save(buffer, format="PNG", optimize=True)
    return buffer.getvalue()


def to_jpeg(image: Image.Image) -> bytes:
    buffer = BytesIO()
    flatten(image).save(buffer, format="JPEG", quality=JPEG_QUALITY)
    return buffer.getvalue()


def to_pdf(image: Image.Image, scale: int) -> bytes:
    """
    Single-page PDF whose page size equals the design size.

    Args:
        image: Rendered design at design size times scale
        scale: Render scale; the pixel density is 72 dpi times the scale
    """
    buffer = BytesIO()
    flatten(image).save(buffer, format="PDF", resolution=72.0 * scale)
    return buffer.getvalue()


def base_filename(company_slug: str, material: str) -> str:
    return f"{company_slug}-{material}-design"


def export_image(image: Image.Image, fmt: ExportFormat, material: str, company_slug: str,
                 scale: int) -> ExportedFile:
    """
    Encode a rendered design for download.

    Args:
        image: Rendered design
        fmt: Output format
        material: Material name used in the filename
        company_slug: Filename prefix
        scale: Render scale, used for the PDF page size

    Returns:
        File content with its download name and media type
    """
    stem = base_filename(company_slug, material)

    if fmt == ExportFormat.PNG:
        content = to_png(image)
        filename = f"{stem}.png"
    elif fmt == ExportFormat.JPG:
        content = to_jpeg(image)
        filename = f"{stem}.jpg"
    elif fmt == ExportFormat.PDF:
        content = to_pdf(image, scale)
        filename = f"{stem}.pdf"
    else:
        buffer = BytesIO()
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
            archive.writestr(f"{stem}.png", to_png(image))
            archive.writestr(f"{stem}.jpg", to_jpeg(image))
            archive.writestr(f"{stem}.pdf", to_pdf(image, scale))
        content = buffer.getvalue()
        filename = f"{company_slug}-{material}-package.zip"

    logger.debug(f"Exported {filename} ({len(content)} bytes)")
    return ExportedFile(content=content, filename=filename, media_type=MEDIA_TYPES[fmt])
