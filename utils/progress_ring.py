from PIL import Image, ImageDraw

from core.models import PlanStatus

SIZE = 140
RING_WIDTH = 12

COLORS = {
    PlanStatus.SAFE: "#2ecc71",
    PlanStatus.RISK: "#ffa500",
    PlanStatus.DANGER: "#ff4b4b",
}
NEUTRAL = "#3b82f6"
TRACK = "#1f2937"
BACKGROUND = "#0e1117"


def arc_extent(value):
    """Degrees of ring to fill for a percentage, clamped to a full circle."""
    value = min(max(value, 0), 100)
    return value / 100 * 360


def progress_ring(value, status=None, size=SIZE):
    img = Image.new("RGBA", (size, size), BACKGROUND)
    draw = ImageDraw.Draw(img)

    pad = RING_WIDTH // 2 + 2
    box = (pad, pad, size - pad, size - pad)

    draw.ellipse(box, outline=TRACK, width=RING_WIDTH)

    extent = arc_extent(value)
    if extent > 0:
        # Start at 12 o'clock, fill clockwise
        draw.arc(box, start=-90, end=-90 + extent, fill=COLORS.get(status, NEUTRAL), width=RING_WIDTH)

    label = f"{value:.2f}%"
    left, top, right, bottom = draw.textbbox((0, 0), label)
    draw.text(
        ((size - (right - left)) / 2, (size - (bottom - top)) / 2 - 6),
        label,
        fill="white"
    )
    draw.text(((size - 24) / 2, size / 2 + 8), "Final", fill="#9ca3af")

    return img
