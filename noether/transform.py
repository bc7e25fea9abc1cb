"""Position, rotation and scale of an object in the scene."""

from __future__ import annotations

from dataclasses import dataclass, field

from noether.matrix import Mat4
from noether.vector import Vec3, Vec4


@dataclass
class Transform:
    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    rotation: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))

    def local_transform(self) -> Mat4:
        """Model matrix: scale, then rotate, then translate."""
        return (
            Mat4.translation(self.position)
            * Mat4.rotation(self.rotation)
            * Mat4.scale(self.scale)
        )

    def transform_direction(self, v: Vec3) -> Vec3:
        """Rotate a direction by this transform's rotation, ignoring position and scale."""
        return Vec3.from_vec4(Mat4.rotation(self.rotation) * Vec4(v.x, v.y, v.z, 0.0))