from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from engine.mesh import FACE_COLORS, FLOATS_PER_VERTEX, cube_data


def test_cube_has_24_vertices_and_36_indices() -> None:
    vertices, indices = cube_data()
    assert vertices.dtype == np.float32
    assert indices.dtype == np.uint16
    assert vertices.size == 24 * FLOATS_PER_VERTEX
    assert indices.size == 36
    assert indices.max() == 23


def test_cube_spans_half_size_and_faces_are_flat_coloured() -> None:
    vertices, _ = cube_data(2.0)
    rows = vertices.reshape(-1, FLOATS_PER_VERTEX)
    assert np.abs(rows[:, :3]).max() == pytest.approx(1.0)
    # Front face first, back face second.
    assert tuple(rows[0, 3:]) == FACE_COLORS["front"]
    assert tuple(rows[4, 3:]) == FACE_COLORS["back"]
    for face in range(6):
        colours = rows[face * 4:(face + 1) * 4, 3:]
        assert (colours == colours[0]).all()
