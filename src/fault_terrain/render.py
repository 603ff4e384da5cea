"""Render plan: draw calls and shading uniforms for a rendering backend.

The core never touches a graphics API. A host uploads the exported buffers
once, then issues the draw calls planned here each frame, combining them with
the material and light uniforms below.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core.models import TerrainBuffers

RenderMode = Literal["polygon", "wireframe", "wirepoly"]
RENDER_MODES: tuple[str, ...] = ("polygon", "wireframe", "wirepoly")

RGB = tuple[float, float, float]


def _check_rgb(v: RGB) -> RGB:
    for c in v:
        if not 0.0 <= c <= 1.0:
            raise ValueError(f"Color component {c} must be within [0, 1]")
    return v


class Material(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    ambient: RGB = (1.0, 1.0, 1.0)
    diffuse: RGB = (205.0 / 255.0, 163.0 / 255.0, 63.0 / 255.0)
    specular: RGB = (0.0, 0.0, 0.0)
    shininess: float = Field(default=23.0, gt=0)

    @field_validator("ambient", "diffuse", "specular")
    @classmethod
    def components_in_unit_range(cls, v: RGB) -> RGB:
        return _check_rgb(v)


class Light(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    # View-space position
    position: tuple[float, float, float] = (0.0, 3.0, 3.0)
    ambient: RGB = (0.0, 0.0, 0.0)
    diffuse: RGB = (1.0, 1.0, 1.0)
    specular: RGB = (0.0, 0.0, 0.0)

    @field_validator("ambient", "diffuse", "specular")
    @classmethod
    def components_in_unit_range(cls, v: RGB) -> RGB:
        return _check_rgb(v)


class ShadingParams(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    material: Material = Field(default_factory=Material)
    light: Light = Field(default_factory=Light)
    fog: bool = True
    edge_dark: RGB = (0.0, 0.0, 0.0)
    edge_light: RGB = (1.0, 1.0, 1.0)

    @field_validator("edge_dark", "edge_light")
    @classmethod
    def components_in_unit_range(cls, v: RGB) -> RGB:
        return _check_rgb(v)


class DrawCall(BaseModel):
    primitive: Literal["triangles", "lines"]
    index_buffer: Literal["triangle_indices", "edge_indices"]
    count: int = Field(ge=0)
    diffuse: RGB


def plan_draw_calls(
    buffers: TerrainBuffers, mode: str, shading: ShadingParams
) -> list[DrawCall]:
    """Draw calls for a render mode, in issue order.

    - polygon: shaded triangles
    - wirepoly: shaded triangles, then dark edges over them
    - wireframe: light edges only
    """
    if mode not in RENDER_MODES:
        raise ValueError(f"Unknown render mode {mode!r}. Use one of: {', '.join(RENDER_MODES)}")

    triangles = DrawCall(
        primitive="triangles",
        index_buffer="triangle_indices",
        count=len(buffers.triangle_indices),
        diffuse=shading.material.diffuse,
    )
    calls = []
    if mode in ("polygon", "wirepoly"):
        calls.append(triangles)
    if mode == "wirepoly":
        calls.append(DrawCall(
            primitive="lines", index_buffer="edge_indices",
            count=len(buffers.edge_indices), diffuse=shading.edge_dark,
        ))
    if mode == "wireframe":
        calls.append(DrawCall(
            primitive="lines", index_buffer="edge_indices",
            count=len(buffers.edge_indices), diffuse=shading.edge_light,
        ))
    return calls


def shading_uniforms(shading: ShadingParams, min_z: float, max_z: float) -> dict:
    """Uniform values uploaded alongside the mesh, keyed by uniform role."""
    m = shading.material
    light = shading.light
    return {
        "shininess": m.shininess,
        "ambient_material": list(m.ambient),
        "diffuse_material": list(m.diffuse),
        "specular_material": list(m.specular),
        "light_position": list(light.position),
        "ambient_light": list(light.ambient),
        "diffuse_light": list(light.diffuse),
        "specular_light": list(light.specular),
        "min_z": min_z,
        "max_z": max_z,
        "fog": shading.fog,
    }
