"""

Render a cortical surface from a segmentation image or a mesh.

"""

# Copyright (c) 2022 Ben Zimmer. All rights reserved.

from typing import Any, Tuple

from surfrender import mesh, patch
from surfrender.params import ParamKeys as Pk, create_params


SPECULAR_STRENGTH = 0.5
DIFFUSE_STRENGTH = 0.75


def render_cortical_surface(cortex: Any, *args, **kwargs) -> Tuple[patch.SurfacePatch, Any]:
    """

    Render a surface in 3D.

    cortex is either a mesh (see mesh.is_mesh) or an image of a binary
    segmentation, such as a path to a nifti file. Images are turned into a
    SurfaceMesh with mesh.mesh_create using the same parameters. It works
    best for the cortical surface but any binary image will do.

    The remaining arguments are the rendering parameters, either positional
    in the order (color, alpha, overlay, thresh, crange, cmap, newfig) or as
    keywords. See params.create_params. color, overlay, thresh, crange, and
    cmap only matter when a mesh is built; a mesh that's passed in is drawn
    with whatever colors it already has.

    By default a new figure is opened. With newfig=False the surface is
    added to the current figure, so it can be combined with other
    renderings and its transparency adjusted.

    Returns the patch, which can be deleted with patch.remove(), and the
    mesh that was drawn.

    """

    params = create_params(args, kwargs)

    if mesh.is_mesh(cortex):
        msh = cortex
    else:
        msh = mesh.mesh_create(cortex, params)
    tri = mesh.triangles(msh)

    if params[Pk.NEWFIG]:
        ax = patch.new_axes()
    else:
        ax = patch.current_axes()

    surf = patch.SurfacePatch(ax, tri)
    surf.set(
        shading='interp',
        lighting='gouraud',
        alpha=params[Pk.ALPHA],
        specular_strength=SPECULAR_STRENGTH,
        diffuse_strength=DIFFUSE_STRENGTH)
    patch.axis_image(ax)

    if params[Pk.NEWFIG]:
        patch.camlight(ax, 'right')

    return surf, msh
