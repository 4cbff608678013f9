"""
Read and write surface meshes as PLY files.
"""

# Copyright (c) 2022 Ben Zimmer. All rights reserved.

import numpy as np
import plyfile

from surfrender.mesh import SurfaceMesh


def read(file_path: str) -> SurfaceMesh:
    """read a ply file"""
    data = plyfile.PlyData.read(file_path)

    vertices = np.stack([
        data['vertex']['x'],
        data['vertex']['y'],
        data['vertex']['z'],
    ], axis=1).astype(np.float64)

    names = data['vertex'].data.dtype.names
    if 'red' in names:
        colors = np.stack([
            data['vertex']['red'],
            data['vertex']['green'],
            data['vertex']['blue']
        ], axis=1) / 255.0
    else:
        colors = None

    faces = np.vstack([x[0] for x in data['face']]).astype(np.int64)

    return SurfaceMesh(vertices, faces, colors=colors)


def write(file_path: str, msh: SurfaceMesh, text: bool = False) -> None:
    """write a ply file with vertex colors if the mesh has them"""

    vertex_type = [('x', 'f4'), ('y', 'f4'), ('z', 'f4')]
    if msh.colors is not None:
        vertex_type += [('red', 'u1'), ('green', 'u1'), ('blue', 'u1')]

    vertex = np.empty(msh.vertices.shape[0], dtype=vertex_type)
    vertex['x'] = msh.vertices[:, 0]
    vertex['y'] = msh.vertices[:, 1]
    vertex['z'] = msh.vertices[:, 2]
    if msh.colors is not None:
        colors = np.round(np.clip(msh.colors[:, 0:3], 0.0, 1.0) * 255.0).astype(np.uint8)
        vertex['red'] = colors[:, 0]
        vertex['green'] = colors[:, 1]
        vertex['blue'] = colors[:, 2]

    face = np.empty(msh.faces.shape[0], dtype=[('vertex_indices', 'i4', (3,))])
    face['vertex_indices'] = msh.faces

    plyfile.PlyData(
        [
            plyfile.PlyElement.describe(vertex, 'vertex'),
            plyfile.PlyElement.describe(face, 'face')
        ],
        text=text).write(file_path)
