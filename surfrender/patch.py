"""

Draw triangle meshes as lit patches in matplotlib 3D axes.

"""

# Copyright (c) 2022 Ben Zimmer. All rights reserved.

from typing import List, Optional

from matplotlib import pyplot as plt
from matplotlib.colors import LightSource
from mpl_toolkits.mplot3d import Axes3D
from mpl_toolkits.mplot3d.art3d import Poly3DCollection
import numpy as np

from surfrender import ops, util
from surfrender.mesh import BRAIN_COLOR
from surfrender.types import Colors, Triangles, Verts


SHADING_MODES = ('faceted', 'flat', 'interp')
LIGHTING_MODES = ('none', 'flat', 'gouraud')

# camlight positions as (azimuth, elevation) offsets from the camera in degrees
CAMLIGHT_OFFSETS = {
    'right': (30.0, 30.0),
    'left': (-30.0, 30.0),
    'headlight': (0.0, 0.0)
}

EDGE_COLOR = (0.0, 0.0, 0.0)
EDGE_WIDTH = 0.25

# attributes of an axes holding the lights and patches that belong to it
LIGHTS_ATTR = '_surfrender_lights'
PATCHES_ATTR = '_surfrender_patches'


def shade(
        normals: Verts,
        colors: Colors,
        lights: List[LightSource],
        view: np.ndarray,
        ambient_strength: float,
        diffuse_strength: float,
        specular_strength: float,
        specular_exponent: float) -> Colors:
    """

    Phong reflectance for a set of normals and base colors.

    Surfaces are lit from both sides. Specular highlights are white.
    With no lights the base colors are returned unchanged.

    """

    if not lights:
        return colors

    res = ambient_strength * colors

    for light in lights:
        light_dir = np.asarray(light.direction)
        n_dot_l = np.dot(normals, light_dir)
        normals_lit = normals * np.sign(n_dot_l + 1.0e-12)[:, np.newaxis]
        n_dot_l = np.abs(n_dot_l)

        res = res + diffuse_strength * n_dot_l[:, np.newaxis] * colors

        reflected = 2.0 * n_dot_l[:, np.newaxis] * normals_lit - light_dir[np.newaxis, :]
        r_dot_v = np.clip(np.dot(reflected, view), 0.0, None)
        res = res + specular_strength * (r_dot_v ** specular_exponent)[:, np.newaxis]

    return np.clip(res, 0.0, 1.0)


class SurfacePatch:
    """a triangle mesh drawn in 3D axes, along with its material"""

    def __init__(self, ax: Axes3D, tri: Triangles):
        """create the patch and add it to the axes"""

        self.axes = ax
        self.triangles = tri

        self.vertices = np.asarray(tri.vertices, dtype=np.float64)
        self.faces = np.asarray(tri.faces)
        if tri.colors is not None:
            self.vertex_colors = np.asarray(tri.colors, dtype=np.float64)[:, 0:3]
        else:
            self.vertex_colors = util.vertex_colors(BRAIN_COLOR, self.vertices.shape[0])

        # material defaults before any set()
        self.shading = 'faceted'
        self.lighting = 'flat'
        self.alpha = 1.0
        self.ambient_strength = 0.3
        self.diffuse_strength = 0.6
        self.specular_strength = 0.9
        self.specular_exponent = 10.0

        self.collection = Poly3DCollection(self.vertices[self.faces, :])
        ax.add_collection3d(self.collection)
        _axes_list(ax, PATCHES_ATTR).append(self)

        self.update()

    def set(self, **kwargs) -> 'SurfacePatch':
        """set one or more material properties and redraw"""
        for key, value in kwargs.items():
            if key not in self._properties():
                raise AttributeError(f'SurfacePatch has no property `{key}`')
            if key == 'shading':
                if value not in SHADING_MODES:
                    raise ValueError(f'shading must be one of {SHADING_MODES}')
            if key == 'lighting':
                if value not in LIGHTING_MODES:
                    raise ValueError(f'lighting must be one of {LIGHTING_MODES}')
            setattr(self, key, value)
        self.update()
        return self

    def get_alpha(self) -> float:
        """opacity"""
        return self.alpha

    def set_alpha(self, alpha: float) -> 'SurfacePatch':
        """set opacity"""
        return self.set(alpha=alpha)

    def face_colors(self) -> Colors:
        """lit RGB color of each face"""

        if self.faces.shape[0] == 0:
            return np.zeros((0, 3))

        lights = _axes_list(self.axes, LIGHTS_ATTR)
        view = ops.direction(self.axes.elev, self.axes.azim)
        strengths = dict(
            ambient_strength=self.ambient_strength,
            diffuse_strength=self.diffuse_strength,
            specular_strength=self.specular_strength,
            specular_exponent=self.specular_exponent)

        if self.lighting == 'gouraud':
            normals = util.vertex_normals((self.vertices, self.faces))
            colors = shade(normals, self.vertex_colors, lights, view, **strengths)
            return self._per_face(colors)

        colors = self._per_face(self.vertex_colors)
        if self.lighting == 'flat':
            normals = np.array(util.tm(self.vertices, self.faces).face_normals)
            colors = shade(normals, colors, lights, view, **strengths)
        return colors

    def update(self) -> None:
        """recompute colors and transparency of the drawn collection"""

        self.collection.set_facecolor(self.face_colors())
        if self.shading == 'faceted':
            self.collection.set_edgecolor(EDGE_COLOR)
            self.collection.set_linewidth(EDGE_WIDTH)
        else:
            self.collection.set_edgecolor('none')
        self.collection.set_alpha(self.alpha)

    def remove(self) -> None:
        """remove the rendering from its axes"""
        self.collection.remove()
        patches = _axes_list(self.axes, PATCHES_ATTR)
        if self in patches:
            patches.remove(self)

    def _per_face(self, colors: Colors) -> Colors:
        """vertex colors to face colors"""
        if self.shading == 'interp':
            return np.mean(colors[self.faces, :], axis=1)
        return colors[self.faces[:, 0], :]

    @staticmethod
    def _properties():
        return (
            'shading', 'lighting', 'alpha',
            'ambient_strength', 'diffuse_strength',
            'specular_strength', 'specular_exponent')


def _axes_list(ax: Axes3D, attr: str) -> list:
    """list stored on an axes, created on first use"""
    if not hasattr(ax, attr):
        setattr(ax, attr, [])
    return getattr(ax, attr)


def patches(ax: Axes3D) -> List[SurfacePatch]:
    """patches currently drawn in an axes"""
    return list(_axes_list(ax, PATCHES_ATTR))


def lights(ax: Axes3D) -> List[LightSource]:
    """lights added to an axes"""
    return list(_axes_list(ax, LIGHTS_ATTR))


def new_axes() -> Axes3D:
    """open a new figure with 3D axes"""
    fig = plt.figure()
    return fig.add_subplot(projection='3d')


def current_axes() -> Axes3D:
    """3D axes of the current figure, added if the figure doesn't have one"""
    fig = plt.gcf()
    if fig.axes:
        ax = fig.gca()
        if ax.name == '3d':
            return ax
    return fig.add_subplot(projection='3d')


def camlight(ax: Axes3D, position: str = 'right') -> LightSource:
    """add a directional light positioned relative to the camera and relight the axes"""

    azim_offset, elev_offset = CAMLIGHT_OFFSETS[position]
    azim = ax.azim + azim_offset
    elev = ax.elev + elev_offset

    # LightSource measures azimuth clockwise from +y
    light = LightSource(azdeg=90.0 - azim, altdeg=elev)
    _axes_list(ax, LIGHTS_ATTR).append(light)

    for patch in patches(ax):
        patch.update()

    return light


def axis_image(ax: Axes3D, pad: Optional[float] = None) -> None:
    """

    Fit the axes to the patches they contain, with equal data units
    along every axis.

    The box aspect is fixed, so it stays the same as the view rotates.

    """

    drawn = patches(ax)
    if not drawn:
        return

    verts = np.concatenate([x.vertices for x in drawn], axis=0)
    if verts.shape[0] == 0:
        return

    bounds = util.verts_bounds(verts)
    lo, hi = bounds[0, :], bounds[1, :]
    extents = hi - lo

    # flat dimensions get a little thickness
    if pad is None:
        pad = 0.5 * np.max(extents) if np.max(extents) > 0 else 0.5
    flat = extents == 0
    lo = np.where(flat, lo - pad, lo)
    hi = np.where(flat, hi + pad, hi)

    ax.set_xlim(lo[0], hi[0])
    ax.set_ylim(lo[1], hi[1])
    ax.set_zlim(lo[2], hi[2])
    ax.set_box_aspect(hi - lo)
