"""

Render a segmentation image as a surface, optionally colored by an overlay.

usage: python iview.py SEGMENTATION [OVERLAY] [OUTPUT.png|OUTPUT.ply]

With no output the surface is shown in an interactive viewer.

"""

# Copyright (c) 2021 Ben Zimmer. All rights reserved.

import os
import sys

import matplotlib
from matplotlib import pyplot as plt

from surfrender import plyio, util
from surfrender.surface import render_cortical_surface


def main(args):
    """main program"""

    if not args:
        print(__doc__)
        return 1

    segmentation_filename = args[0]
    overlay_filename = args[1] if len(args) > 1 else None
    output_filename = args[2] if len(args) > 2 else None

    # a single extra argument is an output if it isn't an image
    if output_filename is None and overlay_filename is not None:
        if os.path.splitext(overlay_filename)[1] in ('.png', '.ply'):
            output_filename, overlay_filename = overlay_filename, None

    if output_filename is not None and output_filename.endswith('.png'):
        matplotlib.use('Agg')

    print('segmentation:', segmentation_filename)
    print('overlay:     ', overlay_filename)
    print('output:      ', output_filename)

    surf, msh = render_cortical_surface(
        segmentation_filename,
        overlay=overlay_filename,
        verbose=True)

    if output_filename is None:
        plt.close(surf.axes.figure)
        util.view_mesh(msh)
    elif output_filename.endswith('.ply'):
        plyio.write(output_filename, msh)
    else:
        surf.axes.figure.savefig(output_filename, dpi=150)

    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
