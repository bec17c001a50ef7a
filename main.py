import sys
import argparse

import halfblock
import sizing
import source


def width_arg(value):
    width = int(value)
    if width < 0:
        raise argparse.ArgumentTypeError(f"width must be >= 0, got {width}")
    return width


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='termimg', description='Render images in the terminal using colored Unicode blocks')
    parser.add_argument('source', help='Path to image file or URL (http/https)')
    parser.add_argument('-w', '--width', type=width_arg, default=None, help='Output width in terminal columns (defaults to terminal width)')
    parser.add_argument('--truecolor', action='store_true', default=False,
                        help='Use 24-bit truecolor (iTerm2, Kitty, ...). Default is 256 colors')
    parser.add_argument('--no-clamp', dest='clamp', action='store_false', default=True,
                        help='Do not shrink tall images to fit the terminal height')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        img = source.load_image(args.source)
    except source.ImageLoadError as e:
        print(e, file=sys.stderr)
        return 1

    x, y = sizing.terminal_size()
    width = args.width if args.width is not None else sizing.detect_width(x)
    rows = y if args.clamp else None

    width, height = sizing.plan_size(img.width, img.height, width, rows)
    img = halfblock.resize(img, width, height)

    try:
        for line in halfblock.render_lines(img, args.truecolor):
            sys.stdout.write(line)
        sys.stdout.flush()
    except OSError as e:
        print(f"Failed to write output: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
