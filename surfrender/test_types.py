"""

Tests for types.

"""

# Copyright (c) 2021 Ben Zimmer. All rights reserved.

import numpy as np

from surfrender import types


def test_types():
    """test types"""

    verts = np.zeros((10, 3), dtype=np.float64)
    faces = np.zeros((20, 3), dtype=np.int64)

    assert isinstance(verts, types.Verts)
    assert isinstance(faces, types.Faces)

    assert isinstance(types.vec3(1, 2, 3), np.ndarray)

    tri = types.Triangles(verts, faces, None)
    assert tri.vertices is verts
    assert tri.faces is faces
    assert tri.colors is None
