import argparse
import time
from example_scenes import SCENES


def render(camera, world, output_path='output.png', progress=True):
    """Render a world through a camera and write the image to output_path."""
    start = time.time()
    canvas = camera.render(world, progress=progress)
    canvas.save(output_path)
    print(f"wrote {output_path} ({camera.hsize}x{camera.vsize}) in {time.time() - start:.1f}s")
    return canvas


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render one of the example scenes.")
    parser.add_argument('scene', nargs='?', default='basic', choices=sorted(SCENES))
    parser.add_argument('--width', type=int, default=100)
    parser.add_argument('--height', type=int, default=50)
    parser.add_argument('--output', default=None,
                        help="output file; .ppm is written as text, other formats go through Pillow")
    parser.add_argument('--quiet', action='store_true', help="don't print per-row progress")
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error("image size must be positive")

    example = SCENES[args.scene](args.width, args.height)
    output_path = args.output or f"{args.scene}.png"
    render(example.camera, example.world, output_path, progress=not args.quiet)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
