"""
Read volumetric images and sample them at points in space.
"""

# Copyright (c) 2022 Ben Zimmer. All rights reserved.

from typing import Any, Tuple

import nibabel as nib
import numpy as np
from scipy import ndimage

from surfrender import ops
from surfrender.types import Mat44, Verts, Volume


def load_volume(image: Any) -> Tuple[Volume, Mat44]:
    """

    Get voxel data and the voxel to world affine of an image.

    image may be a path to anything nibabel can read, an already loaded
    nibabel image, or a bare 3D array (which gets an identity affine).

    """

    if isinstance(image, np.ndarray):
        data = image
        affine = np.eye(4)
    else:
        if not hasattr(image, 'affine'):
            image = nib.load(str(image))
        data = np.asanyarray(image.dataobj)
        affine = np.array(image.affine)

    if data.ndim == 4 and data.shape[-1] == 1:
        data = data[..., 0]

    return data.astype(np.float64), affine


def smooth_volume(data: Volume, size: int) -> Volume:
    """box filter a volume"""
    if size is None or size <= 1:
        return data
    return ndimage.uniform_filter(data, size=size, mode='constant')


def world_to_voxel(points: Verts, affine: Mat44) -> Verts:
    """map world coordinates to (fractional) voxel indices"""
    return ops.transform_verts(points, np.linalg.inv(affine))


def sample_volume(data: Volume, affine: Mat44, points: Verts, order: int = 1) -> np.ndarray:
    """values of a volume at world coordinates, clamped to the edge of the grid"""
    idxs = world_to_voxel(points, affine)
    return ndimage.map_coordinates(data, np.transpose(idxs), order=order, mode='nearest')
