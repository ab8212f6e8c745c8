"""
Minimum-energy seam search.

The pixel grid is treated as a layered DAG: each pixel (x, y) has edges
to (x-1, y+1), (x, y+1) and (x+1, y+1), weighted by the energy of the
target pixel. Because every edge goes from row y to row y+1, shortest
distances from the top row can be finalized one row at a time.

Ties are resolved deterministically:
  - the seam ends at the leftmost bottom-row pixel with minimum distance
  - when walking back up, predecessors are tried in up-left, up, up-right
    order and the first with minimum distance wins
"""

import torch
from typing import List, Tuple

from .errors import InvalidDimension


def seam_distances(energy: torch.Tensor) -> torch.Tensor:
    """
    Cumulative shortest distance from the top row to every pixel.

    Row 0 starts at its own energy; every other pixel is its own energy
    plus the smallest distance among its (up to three) predecessors.

    Args:
        energy: Energy map (H, W)

    Returns:
        Distance map (H, W), same dtype as `energy`

    Raises:
        InvalidDimension: if width or height is 0
    """
    if energy.dim() != 2:
        raise ValueError(f"Expected energy map of shape (H, W), got {tuple(energy.shape)}")
    H, W = energy.shape
    if H == 0 or W == 0:
        raise InvalidDimension(f"Energy map is empty: width={W}, height={H}")

    dist = torch.empty_like(energy)
    dist[0] = energy[0]

    for i in range(1, H):
        prev = dist[i - 1]
        up_left = torch.full((W,), float('inf'), dtype=energy.dtype, device=energy.device)
        up_left[1:] = prev[:-1]
        up_right = torch.full((W,), float('inf'), dtype=energy.dtype, device=energy.device)
        up_right[:-1] = prev[1:]

        best = torch.minimum(torch.minimum(up_left, prev), up_right)
        dist[i] = best + energy[i]

    return dist


def min_seam(energy: torch.Tensor) -> torch.Tensor:
    """
    Find the vertical seam with minimum total energy.

    Args:
        energy: Energy map (H, W)

    Returns:
        Seam indices (H,) - column index per row, rows top to bottom.
        Adjacent entries differ by at most 1.
    """
    dist = seam_distances(energy)
    H, W = dist.shape

    seam = torch.zeros(H, dtype=torch.long, device=energy.device)
    seam[-1] = torch.argmin(dist[-1])

    for i in range(H - 2, -1, -1):
        col = seam[i + 1].item()
        left = max(0, col - 1)
        right = min(W - 1, col + 1)
        neighbors = dist[i, left:right + 1]
        seam[i] = left + torch.argmin(neighbors)

    return seam


def seam_energy(energy: torch.Tensor, seam: torch.Tensor) -> float:
    """Sum of energies along a seam, accumulated top to bottom.

    Summation order matches `seam_distances`, so for the minimum seam the
    result equals the bottom-row distance exactly.
    """
    total = 0.0
    for y, x in enumerate(seam.tolist()):
        total += energy[y, x].item()
    return total


def seam_positions(seam: torch.Tensor) -> List[Tuple[int, int]]:
    """Seam as (x, y) pixel positions, one per row, top to bottom."""
    return [(x, y) for y, x in enumerate(seam.tolist())]


def remove_seam(image: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    """
    Remove a vertical seam from an image.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        seam: Seam indices (H,)

    Returns:
        New image one column narrower; rows keep their remaining pixels in order
    """
    if image.dim() == 2:
        image = image.unsqueeze(0)
        squeeze_output = True
    else:
        squeeze_output = False

    C, H, W = image.shape
    if seam.shape != (H,):
        raise ValueError(f"Seam of shape {tuple(seam.shape)} does not match image height {H}")
    if H > 0 and (seam.min() < 0 or seam.max() >= W):
        raise ValueError(f"Seam leaves the image: columns must lie in [0, {W - 1}]")

    carved = torch.empty(C, H, W - 1, dtype=image.dtype, device=image.device)

    for i in range(H):
        col = seam[i].item()
        carved[:, i, :col] = image[:, i, :col]
        carved[:, i, col:] = image[:, i, col + 1:]

    if squeeze_output:
        carved = carved.squeeze(0)

    return carved


def visualize_seam(image: torch.Tensor, seam: torch.Tensor,
                   color: Tuple[int, int, int] = (255, 0, 0)) -> torch.Tensor:
    """Copy of an RGB image with the seam pixels painted in `color`."""
    img_vis = image.clone()
    paint = torch.tensor(color, dtype=image.dtype, device=image.device)

    for i, col in enumerate(seam.tolist()):
        img_vis[:, i, col] = paint

    return img_vis
