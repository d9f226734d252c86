"""Building blocks for polygon mesh processing: properties, heap, quadrics, normal cones, tessellation and textures."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "properties",
    "timer",
    "memory_usage",
    "barycentric",
    "heap",
    "normal_cone",
    "quadric",
    "tesselation",
    "textures",
]