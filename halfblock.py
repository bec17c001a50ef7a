import sys
from PIL import Image
import numpy as np

import sizing

# ▄ Lower half: background is the top pixel, foreground the bottom one
CHAR = "▄"
RESET = "\033[0m"


def to_ansi_level(v):
    # 0-255 -> 0-5, rounded to nearest
    return (int(v) * 5 + 127) // 255


def rgb_to_256(r, g, b):
    return 16 + 36 * to_ansi_level(r) + 6 * to_ansi_level(g) + to_ansi_level(b)


def ansi256_to_rgb(index):
    """Representative color of a 6x6x6 cube entry (16-231)."""
    if not 16 <= index <= 231:
        raise ValueError(f"{index} is not a color cube index")
    index -= 16
    return (index // 36 * 51, index // 6 % 6 * 51, index % 6 * 51)


def resize(img, width, height):
    return img.convert("RGB").resize((width, height), Image.Resampling.LANCZOS)


def cell(top, bottom, truecolor=False):
    if truecolor:
        return f"\033[48;2;{top[0]};{top[1]};{top[2]}m\033[38;2;{bottom[0]};{bottom[1]};{bottom[2]}m{CHAR}"
    return f"\033[48;5;{rgb_to_256(*top)}m\033[38;5;{rgb_to_256(*bottom)}m{CHAR}"


def render_lines(img, truecolor=False):
    pixels = np.asarray(img.convert("RGB"))
    height, width = pixels.shape[:2]

    for i in range(0, height, 2):
        top_row = pixels[i]
        # odd height: the last row is paired with itself
        bottom_row = pixels[i + 1] if i + 1 < height else top_row

        line = "".join(cell(top_row[j], bottom_row[j], truecolor) for j in range(width))
        yield line + RESET + "\n"


def halfblock(img, x, y=None, truecolor=False):
    width, height = sizing.plan_size(img.width, img.height, x, y)
    img = resize(img, width, height)
    return "".join(render_lines(img, truecolor))


if __name__ == "__main__":
    img = Image.open(sys.argv[1] if len(sys.argv) > 1 else "img.png")
    x, y = sizing.terminal_size()
    sys.stdout.write(halfblock(img, sizing.detect_width(x), y, truecolor=True))
