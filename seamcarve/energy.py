"""
Energy function for seam carving.

The energy of a pixel measures how much its color differs from its
neighbors. Low-energy seams are preferred for removal.

We use the dual-gradient energy: the RGB difference between the two
horizontal neighbors and between the two vertical neighbors,
E(x, y) = sqrt(Δx_R² + Δx_G² + Δx_B² + Δy_R² + Δy_G² + Δy_B²).
"""

import torch

from .errors import InvalidDimension


def check_image(image: torch.Tensor) -> None:
    """Validate that `image` is an integer RGB pixel buffer (3, H, W).

    Raises:
        ValueError: wrong number of dimensions/channels or floating dtype
        InvalidDimension: width or height is 0
    """
    if image.dim() != 3 or image.shape[0] != 3:
        raise ValueError(f"Expected RGB image of shape (3, H, W), got {tuple(image.shape)}")
    if image.is_floating_point():
        raise ValueError(f"Expected integer channel values in [0, 255], got {image.dtype}")

    _, H, W = image.shape
    if H == 0 or W == 0:
        raise InvalidDimension(f"Image is empty: width={W}, height={H}")


def _gradient_pairs(n: int, device: torch.device):
    """Index pairs (a, b) whose difference gives the gradient along one axis.

    Interior pixels use the central pair (i+1, i-1). The first pixel uses
    (i, i+2) and the last (i-2, i). With only two pixels the distance-2
    neighbor falls outside the grid and is clamped back in.
    """
    idx = torch.arange(n, device=device)
    a = idx + 1
    b = idx - 1
    a[0], b[0] = 0, 2
    a[-1], b[-1] = n - 3, n - 1
    return a.clamp(0, n - 1), b.clamp(0, n - 1)


def dual_gradient_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute the dual-gradient energy of an RGB image.

    Squared channel differences are summed as exact integers and a single
    square root is taken in float64, so the result does not depend on the
    input dtype.

    Args:
        image: RGB image tensor (3, H, W) with integer values in [0, 255]

    Returns:
        Energy map (H, W), float64, non-negative

    Raises:
        InvalidDimension: if width or height is below 2
    """
    check_image(image)
    _, H, W = image.shape
    if W < 2 or H < 2:
        raise InvalidDimension(
            f"Energy needs at least 2 pixels along each axis, got width={W}, height={H}")

    pixels = image.to(torch.int64)

    xa, xb = _gradient_pairs(W, image.device)
    ya, yb = _gradient_pairs(H, image.device)

    diff_x = pixels[:, :, xa] - pixels[:, :, xb]
    diff_y = pixels[:, ya, :] - pixels[:, yb, :]

    squared = (diff_x * diff_x).sum(dim=0) + (diff_y * diff_y).sum(dim=0)
    return torch.sqrt(squared.to(torch.float64))


def max_energy(energy: torch.Tensor) -> float:
    """Largest energy value in the map."""
    return energy.max().item()


def energy_to_image(energy: torch.Tensor) -> torch.Tensor:
    """Map energy to a grayscale RGB image for display.

    Intensity is 255 * E / max(E), truncated. A map that is zero everywhere
    becomes a black image.

    Args:
        energy: Energy map (H, W)

    Returns:
        uint8 image tensor (3, H, W)
    """
    peak = max_energy(energy)
    if peak <= 0:
        intensity = torch.zeros_like(energy, dtype=torch.uint8)
    else:
        intensity = (255.0 * energy / peak).to(torch.uint8)
    return intensity.unsqueeze(0).expand(3, -1, -1).clone()
