"""Render Mandelbrot and Julia views from the command line.

Stands in for an interactive front end: clicks become ``--pick``, scroll-wheel
events become ``--zoom`` and a held scroll becomes an animated ``--frames`` run.
"""

from __future__ import annotations

import sys
import warnings
from argparse import ArgumentParser
from pathlib import Path

import imageio
import numpy as np
from matplotlib import colormaps

from fractalview import (
    Bitmap,
    ExplorerConfig,
    FractalExplorer,
    FractalViewError,
    ViewportDescriptor,
    calculate_julia_constant,
    zoom_sequence,
    zoom_viewport,
)
from fractalview.config import DEFAULT_CONFIG, load_config, override_config
from fractalview.console import log, set_verbose


def get_colormap(name):
    return colormaps[name]


def build_parser():
    parser = ArgumentParser(description='Render escape-time fractals (Mandelbrot, Julia) to image files.')

    parser.add_argument('--config', type=str,
                        dest='config', help='YAML file with default settings; explicit flags take precedence',
                        metavar='CONFIG')

    parser.add_argument('--fractal', choices=['mandelbrot', 'julia'],
                        dest='fractal', help='which fractal to render (default: mandelbrot)')

    parser.add_argument('--iterations', type=int,
                        dest='iterations', help='maximum number of escape-time iterations per pixel',
                        metavar='ITERATIONS')

    parser.add_argument('--width', type=int,
                        dest='width', help='image width in pixels',
                        metavar='WIDTH')

    parser.add_argument('--height', type=int,
                        dest='height', help='image height in pixels',
                        metavar='HEIGHT')

    parser.add_argument('--viewport', type=float, nargs=4,
                        dest='viewport', help='visible region of the fractal plane; negative extents flip an axis',
                        metavar=('X1', 'Y1', 'DX', 'DY'))

    parser.add_argument('--julia-constant', type=float, nargs=2,
                        dest='julia_constant', help='complex constant c of the Julia set',
                        metavar=('REAL', 'IMAG'))

    parser.add_argument('--pick', type=float, nargs=2,
                        dest='pick', help='pixel clicked on the Mandelbrot view; renders the Julia set for that point',
                        metavar=('X', 'Y'))

    parser.add_argument('--zoom', type=float, nargs=3, action='append', default=[],
                        dest='zooms', help='scroll-wheel step at a mouse position, applied in order. May be repeated.',
                        metavar=('SCROLL', 'MOUSE_X', 'MOUSE_Y'))

    parser.add_argument('--frames', type=int, default=0,
                        dest='frames', help='repeat the last --zoom step this many times and write the frames as a GIF',
                        metavar='FRAMES')

    parser.add_argument('--colormap', type=str,
                        dest='colormap', help='matplotlib colormap for the escape levels (e.g. "viridis"); default is grayscale',
                        metavar='COLORMAP')

    parser.add_argument('--output', type=str,
                        dest='output', help='destination file (default: fractal.png, or zoom.gif with --frames)',
                        metavar='OUTPUT')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print render parameters and progress.')

    return parser


def resolve_config(opt, parser: ArgumentParser) -> ExplorerConfig:
    try:
        config = load_config(opt.config) if opt.config else DEFAULT_CONFIG
        config = override_config(
            config,
            fractal=opt.fractal,
            iterations=opt.iterations,
            width=opt.width,
            height=opt.height,
            julia_constant=opt.julia_constant,
            colormap=opt.colormap,
        )
        if config.width <= 0 or config.height <= 0:
            parser.error('nothing to write: the image has zero area.')
        if opt.pick is not None:
            if opt.fractal == 'mandelbrot':
                parser.error('--pick selects a Julia constant and cannot be combined with --fractal mandelbrot.')
            constant = calculate_julia_constant(
                ViewportDescriptor(*config.mandelbrot_viewport),
                config.width, config.height, opt.pick[0], opt.pick[1],
            )
            log(f"picked julia constant {constant.real:.6g}{constant.imag:+.6g}i")
            config = override_config(config, fractal='julia', julia_constant=(constant.real, constant.imag))
        if opt.viewport is not None:
            config = config.with_active_viewport(ViewportDescriptor(*opt.viewport))
    except (OSError, ValueError) as exc:
        parser.error(str(exc))
    return config


def _pil_format_name(ext: str) -> str:
    upper = ext.upper()
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper


def colorize(bitmap: Bitmap, colormap: str | None) -> Bitmap:
    """``bitmap`` with its gray escape levels mapped through ``colormap``.

    Without a colormap the bitmap is returned as is. Points inside the set
    keep their transparent pixels.
    """

    if colormap is None:
        return bitmap

    cmap = get_colormap(colormap)
    levels = bitmap.pixels[..., 0].astype(np.float64) / 255.0
    rgba = np.uint8(np.clip(np.array(cmap(levels)) * 255, 0, 255))
    rgba[..., 3] = bitmap.pixels[..., 3]
    rgba.setflags(write=False)
    return Bitmap(bitmap.width, bitmap.height, rgba)


def write_single_image(bitmap: Bitmap, output_path: Path) -> None:
    """Write one RGBA bitmap using the format implied by the file extension."""

    image_format = output_path.suffix.lstrip('.') or 'png'
    if image_format.lower() in {'jpg', 'jpeg', 'bmp'}:
        warnings.warn(f"{image_format} has no alpha channel; the inside of the set is written as black.", stacklevel=2)
        image = bitmap.to_image().convert('RGB')
    else:
        image = bitmap.to_image()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(str(output_path), format=_pil_format_name(image_format))


def render(explorer: FractalExplorer, config: ExplorerConfig, viewport: ViewportDescriptor) -> Bitmap:
    if config.fractal == 'julia':
        return explorer.generate_julia(config.iterations, config.constant, viewport, config.width, config.height)
    return explorer.generate_mandelbrot(config.iterations, viewport, config.width, config.height)


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)
    set_verbose(opt.verbose)

    config = resolve_config(opt, parser)

    if opt.frames < 0:
        parser.error('--frames must not be negative.')
    if opt.frames and not opt.zooms:
        parser.error('--frames requires at least one --zoom step to repeat.')

    explorer = FractalExplorer()
    viewport = config.active_viewport

    try:
        for scroll, mousex, mousey in opt.zooms:
            viewport = zoom_viewport(viewport, scroll, mousex, mousey, config.width, config.height)
            log(f"zoom {scroll:g} at ({mousex:g}, {mousey:g}) -> {viewport}")

        if opt.frames:
            output_path = Path(opt.output or 'zoom.gif').expanduser().resolve()
            if output_path.suffix.lower() != '.gif':
                parser.error('Animated outputs must end with .gif.')
            output_path.parent.mkdir(parents=True, exist_ok=True)
            scroll, mousex, mousey = opt.zooms[-1]
            writer = imageio.get_writer(str(output_path), mode='I', duration=0.1, loop=0)
            try:
                frames = zoom_sequence(viewport, scroll, mousex, mousey, config.width, config.height, opt.frames)
                for i, frame_viewport in enumerate(frames):
                    log("frame {0} out of {1}".format(i, opt.frames), end='\r')
                    frame = colorize(render(explorer, config, frame_viewport), config.colormap)
                    writer.append_data(frame.pixels[..., :3])
                    viewport = frame_viewport
            finally:
                writer.close()
        else:
            output_path = Path(opt.output or 'fractal.png').expanduser().resolve()
            bitmap = render(explorer, config, viewport)
            write_single_image(colorize(bitmap, config.colormap), output_path)
    except FractalViewError as exc:
        parser.error(str(exc))

    log(f"\nfinal viewport: {viewport}")
    log(f"wrote {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
