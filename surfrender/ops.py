"""
Transformations for vertices and directions.
"""

# Copyright (c) 2022 Ben Zimmer. All rights reserved.

import numpy as np

from surfrender.types import Mat44, Mesh, Vec3, Verts


def transform_verts(verts: Verts, mat: Mat44) -> Verts:
    """apply a 4x4 affine to vertices"""

    assert mat.shape == (4, 4), 'transform_verts requires 4x4 matrix'

    rot = mat[0:3, 0:3]
    trans = mat[0:3, 3:4]

    return np.transpose(np.dot(rot, np.transpose(verts)) + trans)


def transform_mesh(mesh: Mesh, mat: Mat44) -> Mesh:
    """transform mesh"""
    verts, faces = mesh
    return transform_verts(verts, mat), faces


def direction(elev: float, azim: float) -> Vec3:
    """unit vector from the origin toward a point at elev / azim (degrees)"""
    elev_rad = np.deg2rad(elev)
    azim_rad = np.deg2rad(azim)
    return np.array([
        np.cos(elev_rad) * np.cos(azim_rad),
        np.cos(elev_rad) * np.sin(azim_rad),
        np.sin(elev_rad)])
