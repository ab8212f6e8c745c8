"""
High-level carving functions: repeated seam removal.

Each iteration recomputes energy on the current image, finds the
minimum seam, and removes it. Nothing is reused between iterations.
"""

import torch

from .energy import check_image, dual_gradient_energy
from .errors import InvalidDimension, InvalidReduction
from .image_io import rotate_image
from .seam import min_seam, remove_seam

PROGRESS_EVERY = 20


def _check_reduction(size: int, other: int, n_seams: int, axis: str) -> None:
    """Reject reductions that cannot complete, before any seam is removed.

    Args:
        size: Current length of the axis being reduced
        other: Length of the axis seams run along
        n_seams: Number of seams requested
        axis: 'width' or 'height', for error messages
    """
    if n_seams < 0:
        raise InvalidReduction(f"Cannot remove a negative number of seams ({n_seams})")
    if n_seams >= size:
        raise InvalidReduction(
            f"Cannot reduce {axis} {size} by {n_seams}: result must be at least 1 pixel")
    if n_seams > 0 and other < 2:
        raise InvalidDimension(
            f"Cannot carve {axis}: seams need at least 2 pixels to run along, got {other}")


def _remove_seams(image: torch.Tensor, n_seams: int, verbose: bool) -> torch.Tensor:
    carved = image.clone()

    for i in range(n_seams):
        energy = dual_gradient_energy(carved)
        seam = min_seam(energy)
        carved = remove_seam(carved, seam)

        if verbose and ((i + 1) % PROGRESS_EVERY == 0 or i + 1 == n_seams):
            print(f"  Removed {i + 1}/{n_seams} seams, size: {tuple(carved.shape)}")

    return carved


def carve_width(image: torch.Tensor, n_seams: int, verbose: bool = False) -> torch.Tensor:
    """
    Reduce image width by removing vertical seams one at a time.

    Args:
        image: RGB image tensor (3, H, W), integer values
        n_seams: Number of columns to remove (0 <= n_seams < W)
        verbose: Print progress every PROGRESS_EVERY seams

    Returns:
        Carved image (3, H, W - n_seams); the input is left untouched

    Raises:
        InvalidDimension: empty image, or height below 2
        InvalidReduction: n_seams negative or >= W
    """
    check_image(image)
    _, H, W = image.shape
    _check_reduction(W, H, n_seams, 'width')

    return _remove_seams(image, n_seams, verbose)


def carve_height(image: torch.Tensor, n_seams: int, verbose: bool = False) -> torch.Tensor:
    """
    Reduce image height by rotating, removing vertical seams, rotating back.

    Args:
        image: RGB image tensor (3, H, W), integer values
        n_seams: Number of rows to remove (0 <= n_seams < H)
        verbose: Print progress every PROGRESS_EVERY seams

    Returns:
        Carved image (3, H - n_seams, W)
    """
    check_image(image)
    _, H, W = image.shape
    _check_reduction(H, W, n_seams, 'height')

    carved = _remove_seams(rotate_image(image), n_seams, verbose)
    return rotate_image(carved)


def carve_image(image: torch.Tensor, width_reduction: int = 0,
                height_reduction: int = 0, verbose: bool = False) -> torch.Tensor:
    """
    Reduce width, then height.

    Both reductions are validated up front, so a request that would fail
    on the height pass fails before any column is removed.

    Returns:
        Carved image (3, H - height_reduction, W - width_reduction)
    """
    check_image(image)
    _, H, W = image.shape
    _check_reduction(W, H, width_reduction, 'width')
    _check_reduction(H, W - width_reduction, height_reduction, 'height')

    carved = image
    if width_reduction > 0:
        carved = carve_width(carved, width_reduction, verbose=verbose)
    if height_reduction > 0:
        carved = carve_height(carved, height_reduction, verbose=verbose)
    if carved is image:
        carved = image.clone()

    return carved
