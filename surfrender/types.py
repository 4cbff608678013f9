"""

Types for meshes, volumes, and related data.

"""

# Copyright (c) 2021 Ben Zimmer. All rights reserved.

from typing import NamedTuple, Optional, Tuple, Union

import numpy as np


Vec3 = Union[np.ndarray, Tuple[float, float, float]]
Color = Union[np.ndarray, Tuple[float, float, float]]

Verts = np.ndarray
Faces = np.ndarray

Colors = np.ndarray  # (n x 3) RGB in [0, 1]

# mesh consists of faces and vertices
Mesh = Tuple[Verts, Faces]

Volume = np.ndarray  # (x, y, z) voxel grid

Mat44 = np.ndarray  # (4 x 4) voxel to world

AABB = np.ndarray  # (2 x 3) minimum and maximum


class Triangles(NamedTuple):
    """triangle data handed to the renderer"""
    vertices: Verts
    faces: Faces
    colors: Optional[Colors]


def vec3(x, y, z) -> Vec3:
    """shorthand for a specific sized numpy array"""
    return np.array([x, y, z])
