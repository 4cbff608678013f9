"""

Common functions for nicer dealings with mesh objects.

"""

# Copyright (c) 2019 Ben Zimmer. All rights reserved.

from typing import Any

import numpy as np
import trimesh
import trimesh.smoothing

from surfrender.types import AABB, Color, Colors, Mesh, Verts


def tm(verts, faces):  # pylint: disable=invalid-name
    """trimesh constructor"""
    return trimesh.Trimesh(verts, faces, process=False)


def smooth(mesh: Mesh, iterations: int) -> Mesh:
    """a wrapper around trimesh's laplacian smoothing"""
    if iterations <= 0:
        return mesh
    mesh_tm = tm(*mesh)
    # filter_laplacian modifies the trimesh in place
    trimesh.smoothing.filter_laplacian(mesh_tm, iterations=iterations)
    return np.array(mesh_tm.vertices), np.array(mesh_tm.faces)


def vertex_normals(mesh: Mesh) -> Verts:
    """area weighted unit normals at each vertex"""
    return np.array(tm(*mesh).vertex_normals)


def vertex_colors(color: Color, length: int) -> Colors:
    """repeat a single RGB color for every vertex"""
    return np.repeat([np.asarray(color, dtype=np.float64)[0:3]], length, axis=0)


def verts_bounds(verts: Verts) -> AABB:
    """find verts AABB"""
    return np.concatenate([
        np.min(verts, axis=0, keepdims=True),
        np.max(verts, axis=0, keepdims=True)], axis=0)


def mesh_bounds(mesh: Mesh) -> AABB:
    """find mesh AABB, for convenience"""
    return verts_bounds(mesh[0])


def view_mesh(mesh: Any, alpha: float = 1.0) -> None:
    """quick and dirty view"""

    # pyrender sets up OpenGL on import
    from surfrender import view

    print('interactive viewer')
    print('\ti - cycle axis options')
    print('\tw - wireframe')
    print('\tq - quit')

    view.view(mesh, alpha)
