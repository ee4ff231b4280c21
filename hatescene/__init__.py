"""Scene graph, meshes, lights, camera, level-of-detail models, mesh animation and collision shapes."""

__version__ = "0.1.0"