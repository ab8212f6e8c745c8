"""
Command-line entry point.

    python -m seamcarve -in photo.jpg -out photo_small.png -width 50 -height 20
"""

import argparse
import sys

import torch

from .carving import carve_image
from .energy import dual_gradient_energy, energy_to_image
from .errors import SeamCarvingError
from .image_io import load_image, save_image
from .seam import min_seam


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seamcarve',
        description="Content-aware image resizing by removing minimum-energy seams"
    )
    parser.add_argument(
        '-in', dest='input', required=True,
        help='Input image path'
    )
    parser.add_argument(
        '-out', dest='output', required=True,
        help='Output image path (PNG recommended)'
    )
    parser.add_argument(
        '-width', dest='width', type=int, default=0,
        help='Number of columns to remove (default: 0)'
    )
    parser.add_argument(
        '-height', dest='height', type=int, default=0,
        help='Number of rows to remove (default: 0)'
    )
    parser.add_argument(
        '--energy-out', type=str,
        help='Also save the energy map of the input image'
    )
    parser.add_argument(
        '--figure', type=str,
        help='Also save an original/energy/carved comparison figure'
    )
    parser.add_argument(
        '--device', type=str,
        default='cuda' if torch.cuda.is_available() else 'cpu',
        help='Torch device (default: cuda if available, else cpu)'
    )
    parser.add_argument(
        '--quiet', action='store_true',
        help='Suppress progress output'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    verbose = not args.quiet

    image = load_image(args.input, device=args.device)
    C, H, W = image.shape
    if verbose:
        print(f"Loaded {args.input}: {W}x{H}")

    try:
        carved = carve_image(image, width_reduction=args.width,
                             height_reduction=args.height, verbose=verbose)
        if args.energy_out or args.figure:
            energy = dual_gradient_energy(image)
    except SeamCarvingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    save_image(carved, args.output)
    if verbose:
        print(f"Carved to {carved.shape[2]}x{carved.shape[1]}")
        print(f"Saved: {args.output}")

    if args.energy_out:
        save_image(energy_to_image(energy), args.energy_out)
        if verbose:
            print(f"Saved: {args.energy_out}")

    if args.figure:
        from .plotting import save_comparison
        save_comparison(image, carved, energy, args.figure, seam=min_seam(energy))
        if verbose:
            print(f"Saved: {args.figure}")

    return 0
