from __future__ import annotations

from typing import Dict

from OpenGL.GL import (
    GL_COMPILE_STATUS,
    GL_FRAGMENT_SHADER,
    GL_LINK_STATUS,
    GL_VERTEX_SHADER,
    glAttachShader,
    glCompileShader,
    glCreateProgram,
    glCreateShader,
    glDeleteShader,
    glGetProgramInfoLog,
    glGetProgramiv,
    glGetShaderInfoLog,
    glGetShaderiv,
    glGetUniformLocation,
    glLinkProgram,
    glShaderSource,
    glUseProgram,
)


class ShaderError(RuntimeError):
    """A shader failed to compile or link. Fatal at startup."""


def _decode(log: bytes | str) -> str:
    return log.decode("utf-8") if isinstance(log, bytes) else str(log)


class Shader:
    def __init__(self, vertex_src: str, fragment_src: str) -> None:
        self.program = glCreateProgram()
        vert = self._compile(GL_VERTEX_SHADER, vertex_src, "vertex")
        frag = self._compile(GL_FRAGMENT_SHADER, fragment_src, "fragment")
        glAttachShader(self.program, vert)
        glAttachShader(self.program, frag)
        glLinkProgram(self.program)
        if glGetProgramiv(self.program, GL_LINK_STATUS) != 1:
            raise ShaderError(f"Program link error: {_decode(glGetProgramInfoLog(self.program))}")
        glDeleteShader(vert)
        glDeleteShader(frag)
        self._uniforms: Dict[str, int] = {}

    def _compile(self, shader_type: int, source: str, stage: str) -> int:
        shader = glCreateShader(shader_type)
        glShaderSource(shader, source)
        glCompileShader(shader)
        if glGetShaderiv(shader, GL_COMPILE_STATUS) != 1:
            raise ShaderError(f"{stage.capitalize()} shader error: {_decode(glGetShaderInfoLog(shader))}")
        return shader

    def uniform(self, name: str) -> int:
        """Cached uniform location; -1 when the driver optimized it out."""
        if name not in self._uniforms:
            self._uniforms[name] = glGetUniformLocation(self.program, name)
        return self._uniforms[name]

    def use(self) -> None:
        glUseProgram(self.program)
