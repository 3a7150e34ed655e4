from __future__ import annotations

import ctypes
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from OpenGL.GL import (
    GL_ARRAY_BUFFER,
    GL_ELEMENT_ARRAY_BUFFER,
    GL_FLOAT,
    GL_STATIC_DRAW,
    GL_TRIANGLES,
    GL_UNSIGNED_SHORT,
    glBindBuffer,
    glBindVertexArray,
    glBufferData,
    glDeleteBuffers,
    glDeleteVertexArrays,
    glDrawElements,
    glEnableVertexAttribArray,
    glGenBuffers,
    glGenVertexArrays,
    glVertexAttribPointer,
)

FLOATS_PER_VERTEX = 6

FACE_COLORS = {
    "front": (1.0, 0.0, 0.0),
    "back": (0.0, 1.0, 0.0),
    "top": (0.0, 0.0, 1.0),
    "bottom": (1.0, 1.0, 0.0),
    "right": (0.0, 1.0, 1.0),
    "left": (1.0, 0.0, 1.0),
}


@dataclass
class Mesh:
    vao: int
    vbo: int
    ebo: int
    index_count: int

    def draw(self) -> None:
        glBindVertexArray(self.vao)
        glDrawElements(GL_TRIANGLES, self.index_count, GL_UNSIGNED_SHORT, ctypes.c_void_p(0))
        glBindVertexArray(0)

    def destroy(self) -> None:
        glDeleteVertexArrays(1, [self.vao])
        glDeleteBuffers(2, [self.vbo, self.ebo])


def cube_data(size: float = 1.0) -> Tuple[np.ndarray, np.ndarray]:
    """Vertices (position + colour, 24 x 6 float32) and CCW uint16 indices of a cube.

    Each face has its own four vertices so it can carry a flat colour.
    """
    s = size / 2.0

    faces = [
        ("front", [(-s, -s, s), (s, -s, s), (s, s, s), (-s, s, s)]),
        ("back", [(-s, -s, -s), (-s, s, -s), (s, s, -s), (s, -s, -s)]),
        ("top", [(-s, s, s), (s, s, s), (s, s, -s), (-s, s, -s)]),
        ("bottom", [(-s, -s, s), (s, -s, s), (s, -s, -s), (-s, -s, -s)]),
        ("right", [(s, -s, s), (s, s, s), (s, s, -s), (s, -s, -s)]),
        ("left", [(-s, -s, s), (-s, -s, -s), (-s, s, -s), (-s, s, s)]),
    ]
    # Winding per face, relative to its first vertex index.
    windings = {
        "front": (0, 1, 2, 2, 3, 0),
        "back": (0, 1, 2, 2, 3, 0),
        "top": (0, 3, 2, 2, 1, 0),
        "bottom": (0, 1, 2, 2, 3, 0),
        "right": (0, 1, 2, 2, 3, 0),
        "left": (0, 3, 2, 2, 1, 0),
    }

    vertices: List[float] = []
    indices: List[int] = []
    for face_index, (name, corners) in enumerate(faces):
        color = FACE_COLORS[name]
        for corner in corners:
            vertices += [*corner, *color]
        base = face_index * 4
        indices += [base + i for i in windings[name]]

    return np.asarray(vertices, dtype=np.float32), np.asarray(indices, dtype=np.uint16)


def _build_mesh(vertices: np.ndarray, indices: np.ndarray) -> Mesh:
    vao = glGenVertexArrays(1)
    vbo = glGenBuffers(1)
    ebo = glGenBuffers(1)
    glBindVertexArray(vao)

    glBindBuffer(GL_ARRAY_BUFFER, vbo)
    glBufferData(GL_ARRAY_BUFFER, vertices.nbytes, vertices, GL_STATIC_DRAW)
    # The element buffer binding is recorded in the VAO.
    glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, ebo)
    glBufferData(GL_ELEMENT_ARRAY_BUFFER, indices.nbytes, indices, GL_STATIC_DRAW)

    stride = FLOATS_PER_VERTEX * 4
    # position
    glEnableVertexAttribArray(0)
    glVertexAttribPointer(0, 3, GL_FLOAT, False, stride, None)
    # colour
    glEnableVertexAttribArray(1)
    glVertexAttribPointer(1, 3, GL_FLOAT, False, stride, ctypes.c_void_p(3 * 4))

    glBindVertexArray(0)
    return Mesh(vao=vao, vbo=vbo, ebo=ebo, index_count=int(indices.size))


def create_cube(size: float = 1.0) -> Mesh:
    vertices, indices = cube_data(size)
    return _build_mesh(vertices, indices)
