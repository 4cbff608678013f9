"""

Surface meshes built from segmentation images.

"""

# Copyright (c) 2022 Ben Zimmer. All rights reserved.

from typing import Any, Dict, Optional, Sequence, Union

import matplotlib
from matplotlib import colors as mcolors
import numpy as np
from skimage import measure
import trimesh

from surfrender import ops, util, volume
from surfrender.params import ParamKeys as Pk
from surfrender.types import Color, Colors, Faces, Triangles, Verts


BRAIN_COLOR = (0.8, 0.7, 0.6)
DEFAULT_CMAP = 'jet'

BOXFILTER = 5
ISOLEVEL = 0.1
SMOOTH_ITERATIONS = 20


class SurfaceMesh:
    """triangulated surface with per-vertex colors and overlay values"""

    def __init__(
            self,
            vertices: Verts,
            faces: Faces,
            colors: Optional[Colors] = None,
            data: Optional[np.ndarray] = None,
            params: Optional[Dict[str, Any]] = None):
        """constructor"""

        self.vertices = vertices
        self.faces = faces
        self.colors = colors
        self.data = data
        self.params = params if params is not None else {}

    def triangles(self) -> Triangles:
        """the mesh's own triangle data, not a copy"""
        return Triangles(self.vertices, self.faces, self.colors)

    def __repr__(self) -> str:
        return (
            f'SurfaceMesh({self.vertices.shape[0]} vertices, '
            f'{self.faces.shape[0]} faces)')


def _is_tuple_mesh(obj: Any) -> bool:
    """check for a (verts, faces) tuple"""
    if not isinstance(obj, tuple) or len(obj) != 2:
        return False
    verts, faces = obj
    if not isinstance(verts, np.ndarray) or not isinstance(faces, np.ndarray):
        return False
    return (
        verts.ndim == 2 and verts.shape[1] == 3 and
        faces.ndim == 2 and faces.shape[1] == 3 and
        np.issubdtype(faces.dtype, np.integer))


def is_mesh(obj: Any) -> bool:
    """check whether something is already a mesh rather than an image"""
    return (
        isinstance(obj, SurfaceMesh) or
        isinstance(obj, trimesh.Trimesh) or
        _is_tuple_mesh(obj))


def triangles(obj: Any) -> Triangles:
    """get the triangle data of anything that passes is_mesh"""

    if isinstance(obj, SurfaceMesh):
        return obj.triangles()

    if isinstance(obj, trimesh.Trimesh):
        if obj.visual.kind == 'vertex':
            colors = np.array(obj.visual.vertex_colors[:, 0:3], dtype=np.float64) / 255.0
        else:
            colors = None
        return Triangles(obj.vertices, obj.faces, colors)

    assert _is_tuple_mesh(obj), 'triangles requires a mesh'
    verts, faces = obj
    return Triangles(verts, faces, None)


def threshold_mask(values: np.ndarray, thresh: Union[None, float, Sequence[float]]) -> np.ndarray:
    """

    Find the overlay values that should be painted.

    thresh is either a single minimum or a (minimum, maximum) pair. Both
    bounds are inclusive. No threshold selects everything.

    """

    if thresh is None:
        return np.ones(values.shape, dtype=bool)

    thresh = np.atleast_1d(np.asarray(thresh, dtype=np.float64))
    mask = values >= thresh[0]
    if thresh.shape[0] > 1:
        mask = np.logical_and(mask, values <= thresh[1])
    return mask


def color_mesh(
        msh: SurfaceMesh,
        color: Optional[Color] = None,
        overlay: Any = None,
        thresh: Union[None, float, Sequence[float]] = None,
        crange: Optional[Sequence[float]] = None,
        cmap: Optional[str] = None) -> SurfaceMesh:
    """

    Color the vertices of a mesh, in place.

    Every vertex gets color. If an overlay image is given, it is sampled
    at each vertex and the vertices that pass thresh are painted with the
    color map instead. crange sets the overlay values that map to the ends
    of the color map and defaults to the range of the painted values.

    """

    color = BRAIN_COLOR if color is None else color
    colors = util.vertex_colors(color, msh.vertices.shape[0])

    if overlay is not None:
        data, affine = volume.load_volume(overlay)
        values = volume.sample_volume(data, affine, msh.vertices)
        msh.data = values

        mask = threshold_mask(values, thresh)
        if np.any(mask):
            if crange is None:
                crange = (np.min(values[mask]), np.max(values[mask]))
            norm = mcolors.Normalize(vmin=crange[0], vmax=crange[1], clip=True)
            colormap = matplotlib.colormaps[cmap if cmap is not None else DEFAULT_CMAP]
            colors[mask, :] = colormap(norm(values[mask]))[:, 0:3]

    msh.colors = colors

    return msh


def mesh_create(image: Any, params: Optional[Dict[str, Any]] = None) -> SurfaceMesh:
    """

    Build a surface mesh from a binary segmentation image.

    The image is box filtered, the isosurface is extracted in voxel
    coordinates and moved into world coordinates with the image affine,
    and the surface is smoothed. Vertices are then colored with
    color_mesh using the color and overlay entries of params.

    """

    params = dict(params) if params is not None else {}
    verbose = params.get(Pk.VERBOSE, False)

    data, affine = volume.load_volume(image)
    data = volume.smooth_volume(data, params.get(Pk.BOXFILTER, BOXFILTER))

    verts, faces, _, _ = measure.marching_cubes(data, level=params.get(Pk.ISOLEVEL, ISOLEVEL))
    verts = ops.transform_verts(verts, affine)

    if verbose:
        print('isosurface:', f'{verts.shape[0]} vertices, {faces.shape[0]} faces', flush=True)

    verts, faces = util.smooth((verts, faces), params.get(Pk.SMOOTH, SMOOTH_ITERATIONS))

    msh = SurfaceMesh(verts, faces, params=params)

    color_mesh(
        msh,
        color=params.get(Pk.COLOR),
        overlay=params.get(Pk.OVERLAY),
        thresh=params.get(Pk.THRESH),
        crange=params.get(Pk.CRANGE),
        cmap=params.get(Pk.CMAP))

    if verbose:
        painted = 0 if msh.data is None else int(np.sum(threshold_mask(msh.data, params.get(Pk.THRESH))))
        print('colors:', f'{painted} / {verts.shape[0]} vertices painted from overlay', flush=True)

    return msh
