"""
Tests for volume access.
"""

# Copyright (c) 2022 Ben Zimmer. All rights reserved.

import nibabel as nib
import numpy as np
import pytest

from surfrender import volume


def test_load_volume_array():
    """bare arrays get an identity affine"""
    data = np.zeros((4, 5, 6), dtype=np.uint8)
    res, affine = volume.load_volume(data)
    assert res.shape == (4, 5, 6)
    assert res.dtype == np.float64
    assert np.array_equal(affine, np.eye(4))


def test_load_volume_nifti(tmp_path):
    """test loading from a path and from an image, squeezing a singleton 4th dimension"""

    data = np.arange(2 * 3 * 4, dtype=np.float32).reshape((2, 3, 4, 1))
    affine = np.diag([2.0, 2.0, 2.0, 1.0])
    img = nib.Nifti1Image(data, affine)
    file_path = tmp_path / 'vol.nii.gz'
    nib.save(img, str(file_path))

    for image in [file_path, str(file_path), img]:
        res, res_affine = volume.load_volume(image)
        assert res.shape == (2, 3, 4)
        assert np.allclose(res, data[..., 0])
        assert np.allclose(res_affine, affine)


def test_load_volume_missing(tmp_path):
    """nibabel's error comes through"""
    with pytest.raises(FileNotFoundError):
        volume.load_volume(tmp_path / 'missing.nii.gz')


def test_sample_volume():
    """test sampling at world coordinates"""

    data = np.indices((5, 5, 5))[0].astype(np.float64)
    affine = np.diag([2.0, 1.0, 1.0, 1.0])
    affine[0, 3] = 10.0

    points = np.array([
        [10.0, 0.0, 0.0],  # voxel 0
        [14.0, 2.0, 2.0],  # voxel 2
        [15.0, 2.0, 2.0],  # halfway between 2 and 3
        [100.0, 2.0, 2.0]  # past the edge
    ])

    values = volume.sample_volume(data, affine, points)
    assert values == pytest.approx([0.0, 2.0, 2.5, 4.0])

    values = volume.sample_volume(data, affine, points, order=0)
    assert values[0:2] == pytest.approx([0.0, 2.0])


def test_smooth_volume():
    """test box filtering"""
    data = np.zeros((7, 7, 7))
    data[3, 3, 3] = 27.0
    res = volume.smooth_volume(data, 3)
    assert res[3, 3, 3] == pytest.approx(1.0)
    assert res[2, 2, 2] == pytest.approx(1.0)
    assert res[0, 0, 0] == pytest.approx(0.0)
    assert volume.smooth_volume(data, 1) is data
