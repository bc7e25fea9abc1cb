"""Shader sources split into stages, and a shader that records its uniforms."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

_DIRECTIVE = "#shader"
_STAGES = ("vertex", "fragment")

UniformValue = Union[int, float, bool, Tuple[float, ...]]


@dataclass(frozen=True)
class ShaderSource:
    vertex: str = ""
    fragment: str = ""


def parse_shader_source(text: str) -> ShaderSource:
    """Split a combined shader file into its vertex and fragment code.

    A line holding '#shader' switches stage when it also names 'vertex' or
    'fragment'; every other line is appended to the current stage.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    code = {stage: [] for stage in _STAGES}
    current: Optional[str] = None
    for number, line in enumerate(lines, start=1):
        if _DIRECTIVE in line:
            if "vertex" in line:
                current = "vertex"
            elif "fragment" in line:
                current = "fragment"
            continue
        if current is None:
            raise ValueError(f"line {number} comes before any '{_DIRECTIVE}' directive")
        code[current].append(line + "\n")

    return ShaderSource("".join(code["vertex"]), "".join(code["fragment"]))


def load_shader_source(path) -> ShaderSource:
    """Read and split a shader file; raises OSError if it cannot be read."""
    return parse_shader_source(Path(path).read_text())


def _floats(values: Iterable[float], count: int, what: str) -> Tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != count:
        raise ValueError(f"{what} needs {count} components, got {len(result)}")
    return result


class Shader:
    """A shader program whose uniform values are kept by name."""

    def __init__(self, source: ShaderSource, path: Optional[str] = None) -> None:
        self.source = source
        self.path = path
        self.bound = False
        self.uniforms: Dict[str, UniformValue] = {}

    @classmethod
    def from_file(cls, path) -> "Shader":
        return cls(load_shader_source(path), str(path))

    @classmethod
    def from_text(cls, text: str) -> "Shader":
        return cls(parse_shader_source(text))

    def bind(self) -> None:
        self.bound = True

    def unbind(self) -> None:
        self.bound = False

    def uniform(self, name: str) -> UniformValue:
        """The last value set for a uniform; raises KeyError if never set."""
        return self.uniforms[name]

    def set_uniform_int(self, name: str, value: int) -> None:
        self.uniforms[name] = int(value)

    def set_uniform_float(self, name: str, value: float) -> None:
        self.uniforms[name] = float(value)

    def set_uniform_float2(self, name: str, v) -> None:
        self.uniforms[name] = _floats(v, 2, name)

    def set_uniform_float3(self, name: str, v) -> None:
        self.uniforms[name] = _floats(v, 3, name)

    def set_uniform_float4(self, name: str, v) -> None:
        self.uniforms[name] = _floats(v, 4, name)

    def set_uniform_mat2(self, name: str, m) -> None:
        self.uniforms[name] = _floats(m, 4, name)

    def set_uniform_mat3(self, name: str, m) -> None:
        self.uniforms[name] = _floats(m, 9, name)

    def set_uniform_mat4(self, name: str, m) -> None:
        self.uniforms[name] = _floats(m, 16, name)

    def set_uniform_bool(self, name: str, value: bool) -> None:
        self.uniforms[name] = bool(value)