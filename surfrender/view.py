"""

Interactive 3D viewer.

"""

# Copyright (c) 2019 Ben Zimmer. All rights reserved.

from typing import Any

import numpy as np
import pyrender
import trimesh

from surfrender import mesh as smesh
from surfrender.mesh import BRAIN_COLOR


def material(alpha: float) -> pyrender.material.MetallicRoughnessMaterial:
    """a dull material that shows vertex colors, blended when not opaque"""
    return pyrender.material.MetallicRoughnessMaterial(
        baseColorFactor=(1.0, 1.0, 1.0, alpha),
        metallicFactor=0.0,
        roughnessFactor=0.75,
        alphaMode='OPAQUE' if alpha >= 1.0 else 'BLEND',
        doubleSided=True)


def to_trimesh(msh: Any) -> trimesh.Trimesh:
    """convert anything that passes mesh.is_mesh to a trimesh with vertex colors"""
    tri = smesh.triangles(msh)
    if tri.colors is not None:
        colors = tri.colors
    else:
        colors = np.repeat([BRAIN_COLOR], tri.vertices.shape[0], axis=0)
    colors = np.round(np.asarray(colors)[:, 0:3] * 255.0).astype(np.uint8)
    return trimesh.Trimesh(
        tri.vertices, tri.faces, vertex_colors=colors, process=False)


def to_pyrender(msh: Any, alpha: float = 1.0) -> pyrender.Mesh:
    """pyrender mesh with smooth normals"""
    return pyrender.Mesh.from_trimesh(to_trimesh(msh), material=material(alpha), smooth=True)


def view(msh: Any, alpha: float = 1.0) -> None:
    """view a single mesh with nice default settings"""
    scene = pyrender.Scene()
    scene.add(to_pyrender(msh, alpha))
    pyrender.Viewer(
        scene,
        viewport_size=(1280, 720),
        render_flags={
            "cull_faces": False},
        viewer_flags={
            "show_world_axis": True,
            "use_raymond_lighting": True,
            "use_perspective_cam": True})
