import os

# one terminal row stays free for the shell prompt
RESERVED_ROWS = 1


def _round(v):
    return int(v + 0.5)


def terminal_size(fallback=(80, 24)):
    try:
        x, y = os.get_terminal_size()
    except OSError:
        return fallback
    return x, y


def detect_width(columns):
    # leave the last column empty so auto-wrapping terminals don't add blank lines
    return max(columns - 1, 0)


def plan_size(orig_width, orig_height, term_width, term_rows=None):
    """Pixel size to resize an image to before rendering it as half blocks.

    Every character cell holds two pixels stacked vertically, so the returned
    height is always even. Width follows the terminal width; when term_rows is
    given the height is clamped to the terminal and the width re-derived from it.
    """
    width = max(term_width, 1)
    height = _round(orig_height / orig_width * width)

    if term_rows is not None:
        max_height = 2 * max(term_rows - RESERVED_ROWS, 0)
        if height > max_height:
            height = max_height
            width = _round(orig_width / orig_height * height)

    width = max(width, 1)
    height = max(height, 1)

    if height % 2 == 1:
        height += 1

    return width, height
