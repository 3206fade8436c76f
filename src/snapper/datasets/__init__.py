"""
Dataset helpers for snapper images and their target sets.
"""

from .snapper_dataset import SnapperDataset, load_snapper_dataset

__all__ = ["SnapperDataset", "load_snapper_dataset"]
