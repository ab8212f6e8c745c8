"""
Image decode/encode and rotation for RGB pixel buffers.

Pixel buffers are uint8 tensors (3, H, W); channel values stay integers
so energy can be computed exactly.
"""

from pathlib import Path

import numpy as np
import torch
from PIL import Image


def load_image(path, device='cpu') -> torch.Tensor:
    """Load an image file as an RGB uint8 tensor (3, H, W)."""
    img = Image.open(path).convert('RGB')
    img_array = np.array(img, dtype=np.uint8)
    img_tensor = torch.from_numpy(img_array).permute(2, 0, 1).contiguous().to(device)
    return img_tensor


def save_image(tensor: torch.Tensor, path) -> Path:
    """Save an RGB tensor (3, H, W) as an image; format follows the suffix."""
    img_array = tensor.permute(1, 2, 0).cpu().numpy()
    img_array = img_array.clip(0, 255).astype(np.uint8)
    path = Path(path)
    Image.fromarray(img_array).save(path)
    return path


def rotate_image(image: torch.Tensor) -> torch.Tensor:
    """Swap width and height: pixel (x, y) moves to (y, x).

    Rotating twice gives back the original image. Height reduction is
    rotate, remove vertical seams, rotate back.
    """
    return image.transpose(-1, -2).contiguous()
