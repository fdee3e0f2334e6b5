"""
Layouts for each marketing material.

Every function draws onto a Canvas sized with DESIGN_SIZES; coordinates are in
design units.
"""

from dataclasses import dataclass
from typing import List, Sequence
import logging

from brokerage.constants import COMPANY_PROFILE, HOME_BUYER_TIPS, SERVICES, TESTIMONIALS
from brokerage.marketing.canvas import Canvas
from brokerage.schemas.marketing import (
    FlyerRequest,
    MaterialType,
    SocialPostRequest,
    SocialTemplate,
)

logger = logging.getLogger(__name__)

DESIGN_SIZES = {
    MaterialType.SOCIAL: (540, 540),
    MaterialType.CARD: (525, 300),
    MaterialType.BROCHURE: (595, 842),
    MaterialType.FLYER: (420, 595),
}

DEFAULT_SCALES = {
    MaterialType.SOCIAL: 4,
    MaterialType.CARD: 4,
    MaterialType.BROCHURE: 3,
    MaterialType.FLYER: 3,
}

WHITE = "#ffffff"
MUTED = "#94a3b8"
LIGHT = "#e2e8f0"
INK = "#1f2937"
BODY = "#374151"
GREY = "#6b7280"
RULE = "#e2e8f0"

FLYER_CTA = "BOOK NOW & SAVE 10% - Early Bird Discount!"


@dataclass
class Branding:
    name: str
    tagline: str
    phone: str
    email: str
    website: str
    address: str
    primary: str
    accent: str
    dark: str

    @classmethod
    def from_settings(cls, settings) -> "Branding":
        return cls(
            name=settings.company_name,
            tagline=settings.company_tagline,
            phone=settings.company_phone,
            email=settings.company_email,
            website=settings.company_website,
            address=settings.company_address,
            primary=settings.brand_primary_color,
            accent=settings.brand_accent_color,
            dark=settings.brand_dark_color,
        )


@dataclass
class Contact:
    """Person printed in the contact block of a design."""
    name: str
    role: str
    phone: str
    email: str

    @classmethod
    def from_member(cls, member, branding: Branding) -> "Contact":
        return cls(
            name=member.name,
            role=member.role,
            phone=member.phone or branding.phone,
            email=member.email or branding.email,
        )

    @classmethod
    def company(cls, branding: Branding) -> "Contact":
        return cls(name=branding.name, role="Sales Team", phone=branding.phone, email=branding.email)


def format_price(price: int) -> str:
    """PKR price in crore or lac for large amounts, e.g. "PKR 8.5 Crore"."""
    if price >= 10_000_000:
        return f"PKR {price / 10_000_000:.1f} Crore"
    if price >= 100_000:
        return f"PKR {price / 100_000:.1f} Lac"
    return f"PKR {price:,}"


def _wordmark(canvas: Canvas, x: float, y: float, branding: Branding, size: float,
              color: str, align: str = "left") -> float:
    """Company name set as a logotype. Returns the y below it."""
    canvas.text(x, y, branding.name.upper(), size, color, bold=True, align=align)
    return y + size * 1.4


def _bars(canvas: Canvas, color: str, height: float = 6) -> None:
    canvas.rect((0, 0, canvas.width, height), color)
    canvas.rect((0, canvas.height - height, canvas.width, canvas.height), color)


def _check_list(canvas: Canvas, x: float, y: float, width: float, items: Sequence[str],
                size: float, text_color: str, mark_color: str, gap: float = 8) -> float:
    for item in items:
        canvas.check(x, y + size * 0.1, size, mark_color)
        y = canvas.paragraph(x + size + 8, y, width - size - 8, item, size, text_color, max_lines=2)
        y += gap - size * 0.35
    return y


def _centered_check_list(canvas: Canvas, y: float, items: Sequence[str], size: float,
                         text_color: str, mark_color: str) -> float:
    for item in items:
        text_w = canvas.text_width(item, size)
        left = (canvas.width - text_w - size - 6) / 2
        canvas.check(left, y + size * 0.1, size, mark_color)
        canvas.text(left + size + 6, y, item, size, text_color)
        y += size + 8
    return y


# Social posts

def render_social(canvas: Canvas, request: SocialPostRequest, branding: Branding, contact: Contact) -> None:
    """Square post in one of the five templates."""
    renderer = {
        SocialTemplate.PROPERTY: _social_property,
        SocialTemplate.SERVICE: _social_service,
        SocialTemplate.TESTIMONIAL: _social_testimonial,
        SocialTemplate.TIPS: _social_tips,
        SocialTemplate.ANNOUNCEMENT: _social_announcement,
    }[request.template]
    logger.debug(f"Rendering social post template={request.template.value}")
    renderer(canvas, request, branding, contact)


def _social_property(canvas: Canvas, request: SocialPostRequest, branding: Branding, contact: Contact) -> None:
    w, h, pad = canvas.width, canvas.height, 36
    inner = w - 2 * pad
    canvas.gradient((0, 0, w, h), request.bg_color, branding.dark, direction="diagonal")

    y = _wordmark(canvas, pad, pad, branding, 16, WHITE) + 4
    y = canvas.paragraph(pad, y, inner, request.title, 24, WHITE, bold=True, line_height=1.2, max_lines=2)
    if request.location:
        canvas.circle((pad + 5, y + 12), 4, branding.accent)
        canvas.text(pad + 16, y + 5, request.location, 14, branding.accent)
        y += 30

    for feature in request.feature_list[:6]:
        canvas.circle((pad + 3, y + 7.5), 3, branding.accent)
        canvas.text(pad + 14, y, feature, 13, WHITE)
        y += 20

    panel_top = h - pad - 76
    canvas.rect((pad, panel_top, w - pad, h - pad), WHITE, radius=10, opacity=0.12)
    canvas.text(pad + 14, panel_top + 12, contact.name, 13, WHITE, bold=True)
    canvas.text(pad + 14, panel_top + 29, contact.role, 11, MUTED)
    canvas.text(pad + 14, panel_top + 45, f"{contact.phone} | {contact.email}", 11, WHITE)
    canvas.text(pad + 14, panel_top + 59, branding.website, 11, WHITE)
    if request.cta_text:
        canvas.text(w - pad - 14, panel_top + 12, request.cta_text, 12, branding.accent, bold=True, align="right")

    subtitle_y = panel_top - 30
    canvas.text(pad, subtitle_y, request.subtitle, 14, WHITE)
    canvas.text(pad, subtitle_y - 40, request.price, 28, branding.accent, bold=True)
    canvas.rect((0, h - 5, w, h), branding.accent)


def _social_service(canvas: Canvas, request: SocialPostRequest, branding: Branding, contact: Contact) -> None:
    w, h, pad = canvas.width, canvas.height, 36
    inner = w - 2 * pad
    canvas.gradient((0, 0, w, h), branding.primary, branding.dark)

    y = _wordmark(canvas, pad, pad, branding, 16, WHITE) + 8
    y = canvas.paragraph(pad, y, inner, request.title, 24, WHITE, bold=True, line_height=1.2, max_lines=2) + 4
    y = canvas.paragraph(pad, y, inner, request.subtitle, 14, branding.accent, max_lines=2) + 12
    _check_list(canvas, pad, y, inner, request.feature_list[:6], 13, WHITE, branding.accent)

    panel_top = h - pad - 74
    canvas.rect((pad, panel_top, w - pad, h - pad), WHITE, radius=10, opacity=0.1)
    canvas.text(pad + 16, panel_top + 14, contact.name, 14, WHITE, bold=True)
    canvas.text(pad + 16, panel_top + 33, contact.role, 12, MUTED)
    canvas.paragraph(pad + 16, panel_top + 52, inner - 32,
                     f"{contact.phone} | {contact.email} | {branding.website}", 11, LIGHT, max_lines=1)


def _social_testimonial(canvas: Canvas, request: SocialPostRequest, branding: Branding, contact: Contact) -> None:
    w, h = canvas.width, canvas.height
    center = w / 2
    canvas.rect((0, 0, w, h), branding.dark)
    _bars(canvas, branding.accent)

    y = _wordmark(canvas, center, 56, branding, 18, WHITE, align="center") + 8
    for i in range(5):
        canvas.star((center + (i - 2) * 26, y + 10), 10, branding.accent)
    y += 40

    quote = request.features.strip() if request.features.strip() else TESTIMONIALS[0]["text"]
    canvas.text(center, y, "\"", 50, branding.accent, align="center")
    y += 44
    y = canvas.paragraph(60, y, w - 120, quote, 16, LIGHT, align="center", line_height=1.6, max_lines=6) + 12

    canvas.text(center, y, request.title or TESTIMONIALS[0]["name"], 14, branding.accent, bold=True, align="center")
    canvas.text(center, y + 20, request.subtitle or TESTIMONIALS[0]["role"], 12, MUTED, align="center")

    canvas.text(center, h - 62, f"{branding.phone} | {branding.email}", 11, MUTED, align="center")
    canvas.text(center, h - 46, branding.website, 11, MUTED, align="center")


def _social_tips(canvas: Canvas, request: SocialPostRequest, branding: Branding, contact: Contact) -> None:
    w, h, pad = canvas.width, canvas.height, 36
    inner = w - 2 * pad
    canvas.gradient((0, 0, w, h), branding.primary, branding.dark, direction="diagonal")

    y = _wordmark(canvas, pad, pad, branding, 14, WHITE) + 4
    title = request.title or f"{len(HOME_BUYER_TIPS)} ESSENTIAL TIPS FOR HOME BUYERS"
    y = canvas.paragraph(pad, y, inner, title, 22, WHITE, bold=True, line_height=1.2, max_lines=2) + 18

    tips = request.feature_list or HOME_BUYER_TIPS
    for number, tip in enumerate(tips[:5], start=1):
        canvas.circle((pad + 16, y + 16), 16, branding.accent)
        canvas.text(pad + 16, y + 8, str(number), 14, branding.dark, bold=True, align="center")
        bottom = canvas.paragraph(pad + 44, y + 7, inner - 44, tip, 13, WHITE, max_lines=2)
        y = max(y + 42, bottom + 10)

    rule_y = h - pad - 44
    canvas.line([(pad, rule_y), (w - pad, rule_y)], branding.accent, width=1)
    canvas.text(pad, rule_y + 14, branding.phone, 11, MUTED)
    canvas.text(pad, rule_y + 29, branding.email, 11, MUTED)
    canvas.text(w - pad, rule_y + 20, branding.website, 11, branding.accent, bold=True, align="right")


def _social_announcement(canvas: Canvas, request: SocialPostRequest, branding: Branding, contact: Contact) -> None:
    w, h = canvas.width, canvas.height
    center = w / 2
    canvas.rect((0, 0, w, h), branding.dark)
    _bars(canvas, branding.accent)

    y = _wordmark(canvas, center, 48, branding, 18, WHITE, align="center") + 10
    y = canvas.paragraph(50, y, w - 100, request.title, 28, WHITE, bold=True, align="center",
                         line_height=1.2, max_lines=2) + 6
    if request.location:
        canvas.text(center, y, request.location, 16, branding.accent, bold=True, align="center")
        y += 34
    canvas.text(center, y, request.price, 32, branding.accent, bold=True, align="center")
    y += 52
    _centered_check_list(canvas, y, request.feature_list[:5], 13, WHITE, branding.accent)

    panel_left, panel_right = w * 0.1, w * 0.9
    panel_top = h - 40 - 44
    canvas.rect((panel_left, panel_top, panel_right, panel_top + 44), branding.accent, radius=10, opacity=0.15)
    canvas.paragraph(panel_left + 14, panel_top + 15, panel_right - panel_left - 28,
                     f"{contact.name} | {contact.phone} | {contact.email}", 12, WHITE,
                     align="center", max_lines=1)


# Business card

def render_card(canvas: Canvas, contact: Contact, branding: Branding) -> None:
    """Front of a business card for one team member."""
    w, h = canvas.width, canvas.height
    left = 28
    canvas.rect((0, 0, w, h), WHITE)
    canvas.rect((0, 0, w, 8), branding.accent)

    y = _wordmark(canvas, left, 26, branding, 20, branding.primary)
    canvas.paragraph(left, y - 6, w - 2 * left, branding.tagline, 9, GREY, max_lines=1)

    canvas.text(left, 88, contact.name, 20, INK, bold=True)
    canvas.text(left, 114, contact.role, 11, GREY)

    rows = [contact.phone, contact.email, branding.website]
    y = 186
    for row in rows:
        canvas.circle((left + 4, y + 6), 3, branding.primary)
        canvas.text(left + 14, y, row, 10, BODY)
        y += 16
    canvas.text(left, y + 4, branding.address, 9, GREY)

    canvas.rect((0, h - 4, w, h), branding.primary)


# Brochures

def _brochure_header(canvas: Canvas, branding: Branding, height: float, lines: Sequence[str],
                     sub_lines: Sequence[tuple]) -> None:
    w = canvas.width
    center = w / 2
    canvas.gradient((0, 0, w, height), branding.primary, branding.dark)

    block = 26 + len(lines) * 36 + 18 + len(sub_lines) * 22
    y = (height - block) / 2
    y = _wordmark(canvas, center, y, branding, 14, branding.accent, align="center") + 4
    for line in lines:
        canvas.text(center, y, line, 30, WHITE, bold=True, align="center")
        y += 36
    canvas.rect((center - 30, y + 4, center + 30, y + 6), branding.accent)
    y += 18
    for text, size, color in sub_lines:
        y = canvas.paragraph(40, y, w - 80, text, size, color, align="center", max_lines=2) + 6


def _brochure_footer(canvas: Canvas, branding: Branding, pad: float, rule_color: str,
                     left_lines: List[str]) -> None:
    w, h = canvas.width, canvas.height
    top = h - pad - 14 * len(left_lines) - 14
    canvas.rect((pad, top, w - pad, top + 2), rule_color)
    y = top + 14
    for line in left_lines:
        canvas.text(pad, y, line, 9, GREY)
        y += 13
    canvas.text(w - pad, top + 14, branding.website, 10, branding.primary, bold=True, align="right")


def render_company_brochure(canvas: Canvas, branding: Branding, team: Sequence) -> None:
    """Company profile with services and the active team."""
    w, pad = canvas.width, 32
    inner = w - 2 * pad
    canvas.rect((0, 0, w, canvas.height), WHITE)

    words = branding.name.upper().split()
    half = (len(words) + 1) // 2
    name_lines = [" ".join(words[:half]), " ".join(words[half:])] if len(words) > 1 else words
    _brochure_header(canvas, branding, canvas.height * 0.35, [line for line in name_lines if line],
                     [(branding.tagline, 14, branding.accent), (branding.address, 11, MUTED)])

    y = canvas.height * 0.35 + pad
    canvas.text(pad, y, "WHO WE ARE", 16, branding.primary, bold=True)
    y = canvas.paragraph(pad, y + 26, inner, COMPANY_PROFILE.format(name=branding.name), 11, BODY,
                         line_height=1.7) + 12

    canvas.text(pad, y, "OUR SERVICES", 14, branding.primary, bold=True)
    y += 26
    column = inner / 2
    for index, service in enumerate(SERVICES):
        x = pad + (index % 2) * column
        row_y = y + (index // 2) * 18
        canvas.check(x, row_y + 1, 10, branding.accent)
        canvas.text(x + 16, row_y, service["title"], 10, BODY)
    y += ((len(SERVICES) + 1) // 2) * 18 + 16

    if team:
        canvas.text(pad, y, "OUR TEAM", 14, branding.primary, bold=True)
        y += 26
        for index, member in enumerate(team[:8]):
            x = pad + (index % 2) * column
            row_y = y + (index // 2) * 30
            canvas.text(x, row_y, member.name, 10, BODY, bold=True)
            canvas.text(x, row_y + 13, member.role, 9, GREY)

    _brochure_footer(canvas, branding, pad, branding.accent,
                     [branding.address, f"{branding.phone} | {branding.email}"])


def render_property_brochure(canvas: Canvas, branding: Branding, listing) -> None:
    """Single-listing brochure built from a Property."""
    w, pad = canvas.width, 40
    inner = w - 2 * pad
    canvas.rect((0, 0, w, canvas.height), WHITE)

    header_height = canvas.height * 0.45
    _brochure_header(canvas, branding, header_height, ["EXCLUSIVE PROPERTY", "LISTING"],
                     [(listing.title, 13, "#cbd5e1")])

    y = header_height + pad
    y = canvas.paragraph(pad, y, inner, listing.title.upper(), 18, branding.primary, bold=True,
                         line_height=1.25, max_lines=2) + 8

    details = [
        ("Type", listing.property_type.value),
        ("Status", listing.status.value),
        ("Location", listing.location),
        ("City", listing.city),
        ("Bedrooms", str(listing.bedrooms)),
        ("Bathrooms", str(listing.bathrooms)),
        ("Area", f"{listing.area:,} sq ft"),
        ("Price", format_price(listing.price)),
    ]
    column = inner / 2
    for index, (label, value) in enumerate(details):
        x = pad + (index % 2) * column
        row_y = y + (index // 2) * 22
        canvas.text(x, row_y, f"{label}:", 12, BODY, bold=True)
        label_w = canvas.text_width(f"{label}: ", 12, bold=True)
        canvas.paragraph(x + label_w, row_y, column - label_w - 8, value, 12, BODY, max_lines=1)
    y += ((len(details) + 1) // 2) * 22 + 10

    if listing.description:
        y = canvas.paragraph(pad, y, inner, listing.description, 12, GREY, line_height=1.6, max_lines=6) + 10

    amenities = listing.amenities or []
    for index, amenity in enumerate(amenities[:8]):
        x = pad + (index % 2) * column
        row_y = y + (index // 2) * 18
        canvas.check(x, row_y + 1, 10, branding.accent)
        canvas.paragraph(x + 16, row_y, column - 24, amenity, 10, BODY, max_lines=1)

    _brochure_footer(canvas, branding, pad, RULE, [f"{branding.phone} | {branding.email}"])


# Flyer

def render_flyer(canvas: Canvas, request: FlyerRequest, branding: Branding, contact: Contact) -> None:
    """A5-style promotional flyer."""
    w, h, pad = canvas.width, canvas.height, 30
    inner = w - 2 * pad
    center = w / 2
    canvas.rect((0, 0, w, h), branding.dark)
    canvas.gradient((0, 0, w, h * 0.55), branding.primary, branding.dark)
    _bars(canvas, branding.accent)

    y = _wordmark(canvas, center, 48, branding, 15, WHITE, align="center") + 8
    y = canvas.paragraph(pad, y, inner, request.title, 22, WHITE, bold=True, align="center",
                         line_height=1.2, max_lines=2) + 6
    canvas.paragraph(pad, y, inner, request.subtitle, 14, branding.accent, bold=True, align="center", max_lines=2)

    y = h * 0.4
    canvas.rect((pad, y, w - pad, y + 58), branding.accent, radius=8, opacity=0.15)
    canvas.text(center, y + 12, "LIMITED UNITS AVAILABLE!", 9, MUTED, align="center")
    canvas.paragraph(pad + 10, y + 26, inner - 20, request.price, 20, branding.accent, bold=True,
                     align="center", max_lines=1)
    _check_list(canvas, pad, y + 74, inner, request.feature_list[:5], 12, WHITE, branding.accent)

    panel_top = h - pad - 74
    cta_top = panel_top - 14 - 32
    canvas.rect((pad, cta_top, w - pad, cta_top + 32), branding.accent, radius=6)
    canvas.text(center, cta_top + 10, FLYER_CTA, 12, branding.dark, bold=True, align="center")

    canvas.rect((pad, panel_top, w - pad, panel_top + 74), WHITE, radius=8, opacity=0.1)
    canvas.text(center, panel_top + 10, f"Contact: {contact.name}", 10, WHITE, bold=True, align="center")
    canvas.text(center, panel_top + 26, f"{contact.phone} | WhatsApp Available", 10, WHITE, align="center")
    canvas.text(center, panel_top + 40, f"{contact.email} | {branding.website}", 10, WHITE, align="center")
    canvas.text(center, panel_top + 56, branding.address, 9, MUTED, align="center")


