"""Generate, validate, build and solve block mazes in a Minecraft world."""

__version__ = "0.1.0"
__all__ = ["agent", "builder", "cli", "escape", "generator", "validator", "world"]