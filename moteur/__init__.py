"""A small scene engine with game objects, components, transforms, meshes, input and a recording renderer."""

__version__ = "0.1.0"
__all__ = ["component", "engine", "gameobject", "input", "transform", "utils", "vertice"]