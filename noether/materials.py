"""Textures, lights and the materials that feed them to shaders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple

from noether.shader import Shader
from noether.vector import Vec3, Vec4


class AttachmentType(Enum):
    COLOR = auto()
    DEPTH = auto()


class ImageFormat(Enum):
    RGBA = auto()
    DEPTH = auto()


@dataclass(frozen=True)
class CubeMapData:
    """Image paths for the six cube faces: +X, -X, +Y, -Y, +Z, -Z."""

    paths: Tuple[str, ...]

    def __post_init__(self) -> None:
        paths = tuple(str(p) for p in self.paths)
        if len(paths) != 6:
            raise ValueError(f"a cube map needs 6 face paths, got {len(paths)}")
        object.__setattr__(self, "paths", paths)


@dataclass(eq=False)
class Texture:
    """A 2D texture, loaded from a file or allocated as a render attachment."""

    path: Optional[str] = None
    format: ImageFormat = ImageFormat.RGBA
    width: int = 0
    height: int = 0
    samples: int = 0
    attachment: AttachmentType = AttachmentType.COLOR
    bound_unit: Optional[int] = field(default=None, init=False)

    def bind(self, unit: int = 0) -> None:
        if unit < 0:
            raise ValueError(f"texture unit must be non-negative, got {unit}")
        self.bound_unit = unit

    def unbind(self) -> None:
        self.bound_unit = None


def _white() -> Vec4:
    return Vec4(1.0, 1.0, 1.0, 1.0)


@dataclass
class PointLight:
    ambient_color: Vec4 = field(default_factory=_white)
    ambient_intensity: float = 0.1
    color: Vec4 = field(default_factory=_white)
    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    constant_attenuation: float = 1.0
    linear_attenuation: float = 0.7
    quadratic_attenuation: float = 1.8


@dataclass
class DirectionalLight:
    ambient_color: Vec4 = field(default_factory=_white)
    ambient_intensity: float = 0.1
    color: Vec4 = field(default_factory=_white)
    intensity: float = 0.3
    direction: Vec3 = field(default_factory=lambda: Vec3(0.0, -0.4, -1.0))


def _require(texture: Optional[Texture], name: str) -> Texture:
    if texture is None:
        raise ValueError(f"material has no {name}")
    return texture


class Material(ABC):
    """Uniform values and textures applied to a shader before drawing."""

    def __init__(self, shader: Shader) -> None:
        self.shader = shader

    @abstractmethod
    def apply(self) -> None:
        """Upload this material's values to its shader."""


class MaterialLit(Material):
    def __init__(
        self,
        shader: Shader,
        ambient_color: Optional[Vec4] = None,
        diffuse_color: Optional[Vec4] = None,
        specular_color: Optional[Vec4] = None,
        diffuse_map: Optional[Texture] = None,
        specular_map: Optional[Texture] = None,
        normal_map: Optional[Texture] = None,
    ) -> None:
        super().__init__(shader)
        self.ambient_color = ambient_color if ambient_color is not None else _white()
        self.diffuse_color = diffuse_color if diffuse_color is not None else _white()
        self.specular_color = specular_color if specular_color is not None else _white()
        self.diffuse_map = diffuse_map
        self.specular_map = specular_map
        self.normal_map = normal_map

    def apply(self) -> None:
        diffuse = _require(self.diffuse_map, "diffuse map")
        specular = _require(self.specular_map, "specular map")
        normal = _require(self.normal_map, "normal map")

        shader = self.shader
        shader.set_uniform_float4("u_MaterialLit.AmbientColor", self.ambient_color)
        shader.set_uniform_float4("u_MaterialLit.DiffuseColor", self.diffuse_color)
        shader.set_uniform_float4("u_MaterialLit.SpecularColor", self.specular_color)

        diffuse.bind(0)
        shader.set_uniform_int("u_MaterialLit.DiffuseMap", 0)
        specular.bind(1)
        shader.set_uniform_int("u_MaterialLit.SpecularMap", 1)
        normal.bind(2)
        shader.set_uniform_int("u_MaterialLit.NormalMap", 2)


class MaterialUnlit(Material):
    def __init__(
        self,
        shader: Shader,
        color: Optional[Vec4] = None,
        color_map: Optional[Texture] = None,
    ) -> None:
        super().__init__(shader)
        self.color = color if color is not None else _white()
        self.color_map = color_map

    def apply(self) -> None:
        color_map = _require(self.color_map, "color map")
        self.shader.set_uniform_float4("u_MaterialUnlit.Color", self.color)
        color_map.bind(0)
        self.shader.set_uniform_int("u_MaterialLit.ColorMap", 0)