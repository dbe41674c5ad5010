from spheretrace.scene.loader import (
    Scene,
    SceneError,
    dump_scene,
    load_scene,
    parse_scene,
    scene_to_dict,
)
from spheretrace.scene.generator import random_spheres, three_spheres

__all__ = [
    "Scene",
    "SceneError",
    "dump_scene",
    "load_scene",
    "parse_scene",
    "random_spheres",
    "scene_to_dict",
    "three_spheres",
]
