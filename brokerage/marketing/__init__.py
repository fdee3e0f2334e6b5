"""
Server-side rendering of marketing collateral with Pillow.
"""

from brokerage.marketing.canvas import Canvas, wrap_text
from brokerage.marketing.export import ExportedFile, export_image
from brokerage.marketing.layouts import (
    DEFAULT_SCALES,
    DESIGN_SIZES,
    Branding,
    Contact,
    format_price,
    render_card,
    render_company_brochure,
    render_flyer,
    render_property_brochure,
    render_social,
)

__all__ = [
    "Canvas",
    "wrap_text",
    "ExportedFile",
    "export_image",
    "DEFAULT_SCALES",
    "DESIGN_SIZES",
    "Branding",
    "Contact",
    "format_price",
    "render_card",
    "render_company_brochure",
    "render_flyer",
    "render_property_brochure",
    "render_social",
]
