# scene/loader.py
"""
Reading and writing JSON scene descriptions.

A scene file holds a ``camera`` object and a list of sphere ``objects``.
Materials are written as a single-key object naming the material, e.g.
``{"Metal": {"albedo": [0.8, 0.8, 0.8], "fuzz": 0.1}}``. Vectors may be
3-element arrays or ``{"x": .., "y": .., "z": ..}`` objects.
"""
import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Union

from spheretrace.camera.camera import CameraConfig
from spheretrace.core.vector import Vector3
from spheretrace.geometry.sphere import Sphere
from spheretrace.materials import MATERIAL_TYPES, Dielectric, Lambertian, Metal

logger = logging.getLogger(__name__)


class SceneError(ValueError):
    """Raised when a scene description is malformed."""


@dataclass
class Scene:
    camera: CameraConfig
    objects: List[Sphere] = field(default_factory=list)


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneError(f"{where}: expected a number, got {value!r}")
    # json accepts NaN and Infinity literals.
    if not math.isfinite(value):
        raise SceneError(f"{where}: expected a finite number, got {value!r}")
    return float(value)


def _vector(value: Any, where: str) -> Vector3:
    if isinstance(value, Mapping):
        try:
            parts = [value["x"], value["y"], value["z"]]
        except KeyError as e:
            raise SceneError(f"{where}: missing component {e.args[0]!r}") from None
    elif isinstance(value, (list, tuple)) and len(value) == 3:
        parts = list(value)
    else:
        raise SceneError(f"{where}: expected 3 numbers, got {value!r}")
    return Vector3(*(_number(p, where) for p in parts))


def _require(data: Mapping, key: str, where: str) -> Any:
    if key not in data:
        raise SceneError(f"{where}: missing required field {key!r}")
    return data[key]


def parse_material(data: Any, where: str = "material"):
    if not isinstance(data, Mapping) or len(data) != 1:
        raise SceneError(
            f"{where}: expected a single-key object such as {{\"Lambertian\": {{...}}}}, got {data!r}")
    (tag, params), = data.items()
    if tag not in MATERIAL_TYPES:
        raise SceneError(f"{where}: unknown material {tag!r}, expected one of {sorted(MATERIAL_TYPES)}")
    if not isinstance(params, Mapping):
        raise SceneError(f"{where}.{tag}: expected an object, got {params!r}")

    where = f"{where}.{tag}"
    try:
        if tag == Lambertian.name:
            return Lambertian(_vector(_require(params, "albedo", where), f"{where}.albedo"))
        if tag == Metal.name:
            return Metal(_vector(_require(params, "albedo", where), f"{where}.albedo"),
                         _number(params.get("fuzz", 0.0), f"{where}.fuzz"))
        return Dielectric(_number(_require(params, "index_of_refraction", where),
                                  f"{where}.index_of_refraction"))
    except SceneError:
        raise
    except ValueError as e:
        raise SceneError(f"{where}: {e}") from e


def parse_sphere(data: Any, where: str = "object") -> Sphere:
    if not isinstance(data, Mapping):
        raise SceneError(f"{where}: expected an object, got {data!r}")
    if "center" in data:
        center_key = "center"
    elif "origin" in data:
        center_key = "origin"
    else:
        raise SceneError(f"{where}: missing required field 'center'")
    center = _vector(data[center_key], f"{where}.{center_key}")
    radius = _number(_require(data, "radius", where), f"{where}.radius")
    if radius < 0:
        raise SceneError(f"{where}.radius: must not be negative, got {radius}")
    material = parse_material(_require(data, "material", where), f"{where}.material")
    center2 = None
    if data.get("center2") is not None:
        center2 = _vector(data["center2"], f"{where}.center2")
    return Sphere(center, radius, material, center2)


def parse_camera(data: Any, where: str = "camera") -> CameraConfig:
    if not isinstance(data, Mapping):
        raise SceneError(f"{where}: expected an object, got {data!r}")
    config = CameraConfig(
        look_from=_vector(_require(data, "look_from", where), f"{where}.look_from"),
        look_at=_vector(_require(data, "look_at", where), f"{where}.look_at"),
        vup=_vector(data.get("vup", [0.0, 1.0, 0.0]), f"{where}.vup"),
        vfov=_number(_require(data, "vfov", where), f"{where}.vfov"),
        aspect_ratio=_number(_require(data, "aspect_ratio", where), f"{where}.aspect_ratio"),
        defocus_angle=_number(data.get("defocus_angle", 0.0), f"{where}.defocus_angle"),
        focus_dist=_number(data.get("focus_dist", 10.0), f"{where}.focus_dist"),
    )
    try:
        config.validate()
    except ValueError as e:
        raise SceneError(f"{where}: {e}") from e
    return config


def parse_scene(data: Any) -> Scene:
    if not isinstance(data, Mapping):
        raise SceneError(f"scene: expected an object, got {type(data).__name__}")
    camera = parse_camera(_require(data, "camera", "scene"))
    objects = _require(data, "objects", "scene")
    if not isinstance(objects, list):
        raise SceneError(f"scene.objects: expected a list, got {objects!r}")
    spheres = [parse_sphere(obj, f"objects[{i}]") for i, obj in enumerate(objects)]
    return Scene(camera, spheres)


def load_scene(path: Union[str, Path]) -> Scene:
    """
    Load a scene from a JSON file. Raises OSError if the file cannot be read
    and SceneError if its contents are not a valid scene.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SceneError(f"{path}: invalid JSON: {e}") from e
    scene = parse_scene(data)
    logger.info("Loaded %s: %d objects", path, len(scene.objects))
    return scene


def material_to_dict(material) -> dict:
    return {material.name: material.to_dict()}


def sphere_to_dict(sphere: Sphere) -> dict:
    data = {
        "center": list(sphere.center),
        "radius": sphere.radius,
        "material": material_to_dict(sphere.material),
    }
    if sphere.center2 is not None:
        data["center2"] = list(sphere.center2)
    return data


def camera_to_dict(config: CameraConfig) -> dict:
    return {
        "look_from": list(config.look_from),
        "look_at": list(config.look_at),
        "vup": list(config.vup),
        "vfov": config.vfov,
        "aspect_ratio": config.aspect_ratio,
        "defocus_angle": config.defocus_angle,
        "focus_dist": config.focus_dist,
    }


def scene_to_dict(scene: Scene) -> dict:
    return {
        "camera": camera_to_dict(scene.camera),
        "objects": [sphere_to_dict(s) for s in scene.objects],
    }


def dump_scene(scene: Scene, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(scene_to_dict(scene), indent=2), encoding="utf-8")
    logger.info("Saved scene with %d objects to %s", len(scene.objects), path)
    return path
