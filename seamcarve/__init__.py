"""
Content-aware image resizing by seam carving.

Repeatedly removes the connected top-to-bottom path of pixels with the
lowest total dual-gradient energy (Avidan & Shamir 2007).
"""

__version__ = "0.1.0"

from .errors import SeamCarvingError, InvalidDimension, InvalidReduction
from .energy import dual_gradient_energy, max_energy, energy_to_image
from .seam import (seam_distances, min_seam, seam_energy, seam_positions,
                   remove_seam, visualize_seam)
from .carving import carve_width, carve_height, carve_image
from .image_io import load_image, save_image, rotate_image

__all__ = [
    'SeamCarvingError',
    'InvalidDimension',
    'InvalidReduction',
    'dual_gradient_energy',
    'max_energy',
    'energy_to_image',
    'seam_distances',
    'min_seam',
    'seam_energy',
    'seam_positions',
    'remove_seam',
    'visualize_seam',
    'carve_width',
    'carve_height',
    'carve_image',
    'load_image',
    'save_image',
    'rotate_image',
]
