"""Building blocks for a grid raycaster: images, rays, wall columns, sprites, doors and an enemy."""

__version__ = "0.1.0"

__all__ = [
    "blink",
    "canvas",
    "doors",
    "drawline",
    "enemy",
    "errors",
    "image",
    "raycast",
    "sprites",
    "walls",
    "xpm42",
]