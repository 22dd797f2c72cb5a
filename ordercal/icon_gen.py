"""Generate the window icon (64×64 PIL Image, in-memory)."""

from datetime import date
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from ordercal.services.ui_theme import AVAILABLE, ORDERED


def create_icon_image(today: Optional[date] = None) -> Image.Image:
    """Return a 64×64 RGBA calendar page: coloured header band, day of month below."""
    size = 64
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    draw.rounded_rectangle((2, 4, size - 3, size - 3), radius=8, fill="white", outline=AVAILABLE, width=3)
    draw.rectangle((4, 6, size - 5, 20), fill=AVAILABLE)
    draw.ellipse((size - 16, 24, size - 8, 32), fill=ORDERED)

    text = str((today or date.today()).day)

    # Largest font that fits under the header band
    box_w, box_h = size - 12, size - 28
    font_size = 60
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= box_w and bbox[3] - bbox[1] <= box_h:
            break
        font_size -= 1

    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = 22 + (box_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
