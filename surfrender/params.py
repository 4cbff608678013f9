"""

Rendering parameters.

"""

# Copyright (c) 2022 Ben Zimmer. All rights reserved.

from typing import Any, Dict, Sequence


class ParamKeys:
    """keys for the parameter dict"""

    COLOR = 'color'          # RGB color of the surface
    ALPHA = 'alpha'          # opacity, 0 is invisible and 1 is opaque
    OVERLAY = 'overlay'      # scalar image used to color the surface
    THRESH = 'thresh'        # minimum or (minimum, maximum) of painted overlay values
    CRANGE = 'crange'        # overlay values mapped to the ends of the color map
    CMAP = 'cmap'            # name of the color map
    NEWFIG = 'newfig'        # whether to open a new figure

    # mesh construction only
    SMOOTH = 'smooth'        # laplacian smoothing iterations
    BOXFILTER = 'boxfilter'  # size of box filter applied to the image
    ISOLEVEL = 'isolevel'    # level of the extracted isosurface
    VERBOSE = 'verbose'      # print mesh construction progress


# order of the legacy positional arguments
POSITIONAL_KEYS = [
    ParamKeys.COLOR,
    ParamKeys.ALPHA,
    ParamKeys.OVERLAY,
    ParamKeys.THRESH,
    ParamKeys.CRANGE,
    ParamKeys.CMAP,
    ParamKeys.NEWFIG
]

ALL_KEYS = set(POSITIONAL_KEYS + [
    ParamKeys.SMOOTH,
    ParamKeys.BOXFILTER,
    ParamKeys.ISOLEVEL,
    ParamKeys.VERBOSE
])

DEFAULT_ALPHA = 1.0
DEFAULT_NEWFIG = True


def _is_name_value_list(args: Sequence) -> bool:
    """check for a flat list of alternating names and values"""
    return (
        len(args) > 0 and
        len(args) % 2 == 0 and
        all(isinstance(x, str) and x in ALL_KEYS for x in args[0::2]))


def create_params(args: Sequence, kwargs: Dict[str, Any]) -> Dict[str, Any]:
    """

    Create a parameter dict from the arguments of a rendering call.

    args may be a single dict, a flat list of names and values, or the
    legacy positional arguments (color, alpha, overlay, thresh, crange,
    cmap, newfig) where None means the argument wasn't given. Keyword
    arguments override anything in args.

    alpha and newfig get defaults, everything else is only present if it
    was given. Values are not validated.

    """

    params = {}

    if len(args) == 1 and isinstance(args[0], dict):
        params.update(args[0])
    elif _is_name_value_list(args):
        params.update(zip(args[0::2], args[1::2]))
    else:
        if len(args) > len(POSITIONAL_KEYS):
            raise TypeError(
                f'expected at most {len(POSITIONAL_KEYS)} positional parameters, got {len(args)}')
        params.update({
            key: value
            for key, value in zip(POSITIONAL_KEYS, args)
            if value is not None})

    params.update(kwargs)

    for key in params:
        if key not in ALL_KEYS:
            raise KeyError(f'unknown parameter `{key}`')

    if params.get(ParamKeys.ALPHA) is None:
        params[ParamKeys.ALPHA] = DEFAULT_ALPHA
    if params.get(ParamKeys.NEWFIG) is None:
        params[ParamKeys.NEWFIG] = DEFAULT_NEWFIG

    return params
