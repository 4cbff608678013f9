"""

Shared test setup.

"""

# Copyright (c) 2022 Ben Zimmer. All rights reserved.

import matplotlib
matplotlib.use('Agg')

from matplotlib import pyplot as plt  # pylint: disable=wrong-import-position
import pytest  # pylint: disable=wrong-import-position


@pytest.fixture(autouse=True)
def close_figures():
    """close any figures a test opened"""
    yield
    plt.close('all')
