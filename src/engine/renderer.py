from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
from OpenGL import GL

from .logger import ChannelLogger
from .math3d import Mat4
from .shader import Shader
from .state import RenderCommand, RenderItem


VERTEX_SRC = """
#version 330 core
layout(location = 0) in vec3 a_position;
layout(location = 1) in vec3 a_color;

uniform mat4 u_modelViewMatrix;
uniform mat4 u_projectionMatrix;

out vec3 v_viewPos;
out vec3 v_color;

void main() {
    vec4 viewPos = u_modelViewMatrix * vec4(a_position, 1.0);
    v_viewPos = viewPos.xyz;
    v_color = a_color;
    gl_Position = u_projectionMatrix * viewPos;
}
"""

FRAGMENT_SRC = """
#version 330 core

in vec3 v_viewPos;
in vec3 v_color;

out vec4 oColor;

uniform vec3 u_lightPosView;
uniform int u_isLight;

void main() {
    if (u_isLight == 1) {
        oColor = vec4(1.0, 1.0, 1.0, 1.0);
        return;
    }

    // Flat face normal from screen-space derivatives (the cube has no normals).
    vec3 n = normalize(cross(dFdx(v_viewPos), dFdy(v_viewPos)));
    vec3 toLight = normalize(u_lightPosView - v_viewPos);
    float diffuse = max(dot(n, toLight), 0.0);
    float ambient = 0.2;
    oColor = vec4(v_color * (ambient + (1.0 - ambient) * diffuse), 1.0);
}
"""


class Material:
    """Shader binding shared by every object drawn with it."""

    def __init__(self, shader: Shader) -> None:
        self.shader = shader
        self._loc_model_view = shader.uniform("u_modelViewMatrix")
        self._loc_projection = shader.uniform("u_projectionMatrix")
        self._loc_light_pos = shader.uniform("u_lightPosView")
        self._loc_is_light = shader.uniform("u_isLight")

    def use(self) -> None:
        self.shader.use()

    def set_uniforms(self, model: Mat4, view: Mat4, projection: Mat4) -> None:
        model_view = view @ model
        GL.glUniformMatrix4fv(self._loc_model_view, 1, GL.GL_FALSE, _mat(model_view))
        GL.glUniformMatrix4fv(self._loc_projection, 1, GL.GL_FALSE, _mat(projection))

    def set_light(self, light_view_position: Iterable[float], is_light: bool) -> None:
        if self._loc_is_light != -1:
            GL.glUniform1i(self._loc_is_light, 1 if is_light else 0)
        if self._loc_light_pos != -1:
            x, y, z = light_view_position
            GL.glUniform3f(self._loc_light_pos, float(x), float(y), float(z))


def _mat(m: Mat4) -> np.ndarray:
    return np.asarray(m.to_list(), dtype=np.float32)


class Renderer:
    def __init__(self, log: Optional[ChannelLogger] = None) -> None:
        self.clear_color = (0.0, 0.0, 0.0)
        self.shader = Shader(VERTEX_SRC, FRAGMENT_SRC)
        self.material = Material(self.shader)
        GL.glEnable(GL.GL_DEPTH_TEST)
        if log:
            log.info("Renderer ready (GL %s)", _gl_string(GL.GL_VERSION))

    def resize(self, width: int, height: int) -> None:
        GL.glViewport(0, 0, width, height)

    def render(self, command: RenderCommand) -> None:
        r, g, b = self.clear_color
        GL.glClearColor(float(r), float(g), float(b), 1.0)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT | GL.GL_DEPTH_BUFFER_BIT)

        light = command.light_view_position.as_list()
        for item in command.items:
            self.draw_item(item, command, light)

    def draw_item(self, item: RenderItem, command: RenderCommand, light: Iterable[float]) -> None:
        material = item.material if item.material is not None else self.material
        material.use()
        material.set_uniforms(item.model, command.view, command.projection)
        material.set_light(light, item.is_light)
        item.mesh.draw()


def _gl_string(name: int) -> str:
    value = GL.glGetString(name)
    return value.decode("utf-8") if isinstance(value, bytes) else str(value)
