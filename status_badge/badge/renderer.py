"""Deterministic SVG rendering for two-segment status badges."""

from __future__ import annotations

from typing import Final
from xml.sax.saxutils import escape

from status_badge.domain import BadgeSpec

SVG_MEDIA_TYPE: Final[str] = "image/svg+xml"

BADGE_HEIGHT: Final[int] = 20
CHAR_WIDTH: Final[int] = 7
SEGMENT_PADDING: Final[int] = 10

_XML_ATTRIBUTE_ENTITIES: Final[dict[str, str]] = {'"': "&quot;", "'": "&apos;"}

_SVG_TEMPLATE: Final[str] = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{total_width}" height="{height}" '
    'role="img" aria-label="{title}">\n'
    "  <title>{title}</title>\n"
    '  <linearGradient id="smooth" x2="0" y2="100%">\n'
    '    <stop offset="0" stop-color="#bbb" stop-opacity=".1"/>\n'
    '    <stop offset="1" stop-opacity=".1"/>\n'
    "  </linearGradient>\n"
    '  <clipPath id="round">\n'
    '    <rect width="{total_width}" height="{height}" rx="3" fill="#fff"/>\n'
    "  </clipPath>\n"
    '  <g clip-path="url(#round)">\n'
    '    <rect id="leftRect" fill="{left_color}" width="{left_width}" height="{height}"/>\n'
    '    <rect id="rightRect" fill="{right_color}" x="{left_width}" width="{right_width}" height="{height}"/>\n'
    '    <rect fill="url(#smooth)" width="{total_width}" height="{height}"/>\n'
    "  </g>\n"
    '  <g fill="#fff" text-anchor="middle" font-family="DejaVu Sans,Verdana,Geneva,sans-serif" font-size="11">\n'
    '    <text id="leftText" x="{left_text_x}" y="14">{left_text}</text>\n'
    '    <text id="rightText" x="{right_text_x}" y="14">{right_text}</text>\n'
    "{revision_element}"
    "  </g>\n"
    "</svg>\n"
)

_REVISION_TEMPLATE: Final[str] = (
    '    <text id="revisionText" x="{revision_text_x}" y="14" font-size="10">{revision_text}</text>\n'
)


def _badge_text_width(text: str) -> int:
    return len(text) * CHAR_WIDTH + 2 * SEGMENT_PADDING


def _badge_format_coordinate(value: float) -> str:
    return f"{value:.1f}"


def badge_render_svg(spec: BadgeSpec) -> bytes:
    """Render a badge spec as a UTF-8 SVG document.

    The left segment carries the health label and the right segment the sync
    label. A revision suffix widens the right segment and is drawn after the
    sync label. Output bytes depend only on the spec.

    Args:
        spec: Badge colors and labels.

    Returns:
        bytes: Encoded SVG document.

    Raises:
        ValueError: Raised when a color channel is out of range.
    """

    left_width = _badge_text_width(spec.left_text)
    right_label_width = _badge_text_width(spec.right_text)
    right_width = right_label_width

    revision_element = ""
    if spec.revision_suffix:
        revision_width = len(spec.revision_suffix) * CHAR_WIDTH + SEGMENT_PADDING
        right_width = right_label_width + revision_width
        revision_text_x = left_width + right_label_width + (revision_width - SEGMENT_PADDING) / 2
        revision_element = _REVISION_TEMPLATE.format(
            revision_text_x=_badge_format_coordinate(revision_text_x),
            revision_text=escape(spec.revision_suffix),
        )

    title = f"{spec.left_text} | {spec.right_text}"
    if spec.revision_suffix:
        title = f"{title} {spec.revision_suffix}"

    document = _SVG_TEMPLATE.format(
        total_width=left_width + right_width,
        height=BADGE_HEIGHT,
        title=escape(title, _XML_ATTRIBUTE_ENTITIES),
        left_color=spec.left_color.color_to_hex_string(),
        right_color=spec.right_color.color_to_hex_string(),
        left_width=left_width,
        right_width=right_width,
        left_text_x=_badge_format_coordinate(left_width / 2),
        right_text_x=_badge_format_coordinate(left_width + right_label_width / 2),
        left_text=escape(spec.left_text),
        right_text=escape(spec.right_text),
        revision_element=revision_element,
    )
    return document.encode("utf-8")
