"""Shared test fixtures for the seam carving test suite."""

import math
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


@pytest.fixture
def random_image():
    """Seeded 3x12x16 RGB noise image."""
    return make_random_image(12, 16, seed=42)


def make_uniform_image(H, W, color=(0, 0, 0)):
    """Every pixel set to the same RGB color."""
    return torch.tensor(color, dtype=torch.uint8).view(3, 1, 1).expand(3, H, W).clone()


def make_random_image(H, W, seed=0):
    """RGB noise image with uint8 channels."""
    gen = torch.Generator().manual_seed(seed)
    return torch.randint(0, 256, (3, H, W), generator=gen, dtype=torch.int64).to(torch.uint8)


def reference_energy(image):
    """Dual-gradient energy computed pixel by pixel in plain Python."""
    _, H, W = image.shape
    px = image.tolist()

    def offsets(i, n):
        if i == 0:
            a, b = 0, 2
        elif i == n - 1:
            a, b = n - 3, n - 1
        else:
            a, b = i + 1, i - 1
        return min(max(a, 0), n - 1), min(max(b, 0), n - 1)

    energy = []
    for y in range(H):
        row = []
        for x in range(W):
            xa, xb = offsets(x, W)
            ya, yb = offsets(y, H)
            total = 0
            for c in range(3):
                total += (px[c][y][xa] - px[c][y][xb]) ** 2
                total += (px[c][ya][x] - px[c][yb][x]) ** 2
            row.append(math.sqrt(total))
        energy.append(row)
    return energy
