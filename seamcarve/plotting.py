"""Before/after figures for seam carving runs."""

from pathlib import Path

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
import torch

from .seam import visualize_seam


def tensor_to_numpy(t: torch.Tensor):
    """Convert (3,H,W) or (H,W) tensor to numpy for display."""
    if t.dim() == 3:
        return t.permute(1, 2, 0).cpu().numpy()
    return t.cpu().numpy()


def save_comparison(original: torch.Tensor, carved: torch.Tensor,
                    energy: torch.Tensor, path, seam: torch.Tensor = None) -> Path:
    """Save original, energy map and carved image side by side.

    If `seam` is given it is painted red on the original.
    """
    if seam is not None:
        original_view = visualize_seam(original, seam)
    else:
        original_view = original

    fig, axes = plt.subplots(1, 3, figsize=(18, 6))
    panels = [
        (tensor_to_numpy(original_view), 'Original'),
        (tensor_to_numpy(energy), 'Energy'),
        (tensor_to_numpy(carved), 'Carved'),
    ]
    for ax, (img, title) in zip(axes, panels):
        if img.ndim == 2:
            ax.imshow(img, cmap='gray')
        else:
            ax.imshow(img)
        ax.set_title(title, fontsize=11)
        ax.axis('off')

    C, H, W = original.shape
    _, h, w = carved.shape
    fig.suptitle(f"{W}x{H} -> {w}x{h}", fontsize=14, fontweight='bold')

    plt.tight_layout()
    path = Path(path)
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return path
