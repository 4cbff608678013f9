"""

Unit tests for mesh utilities.

"""

# Copyright (c) 2021 Ben Zimmer. All rights reserved.

import numpy as np
import trimesh

from surfrender import util


def test_smooth():
    """unit test for wrapper around trimesh smoothing"""

    sphere = trimesh.creation.icosphere(subdivisions=2, radius=1.0)
    mesh = (np.array(sphere.vertices), np.array(sphere.faces))

    # zero iterations is a no-op
    assert util.smooth(mesh, 0) is mesh

    verts, faces = util.smooth(mesh, 5)
    assert verts.shape == mesh[0].shape
    assert np.array_equal(faces, mesh[1])

    # the input isn't modified
    assert np.allclose(mesh[0], sphere.vertices)


def test_vertex_colors():
    """test vertex_colors"""
    colors = util.vertex_colors((0.1, 0.2, 0.3), 4)
    assert colors.shape == (4, 3)
    assert np.allclose(colors[3, :], [0.1, 0.2, 0.3])

    # alpha is dropped
    colors = util.vertex_colors((0.1, 0.2, 0.3, 0.5), 2)
    assert colors.shape == (2, 3)


def test_bounds():
    """test verts_bounds and mesh_bounds"""
    verts = np.array([
        [0.0, -1.0, 2.0],
        [1.0, 1.0, 0.0]
    ])
    bounds = util.mesh_bounds((verts, np.zeros((0, 3), dtype=np.int64)))
    assert np.allclose(bounds, [[0.0, -1.0, 0.0], [1.0, 1.0, 2.0]])


def test_vertex_normals():
    """test vertex_normals on a flat quad"""
    verts = np.array([
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [1.0, 1.0, 0.0]
    ])
    faces = np.array([[0, 1, 2], [1, 3, 2]])
    normals = util.vertex_normals((verts, faces))
    assert normals.shape == (4, 3)
    assert np.allclose(normals, [[0.0, 0.0, 1.0]] * 4)
