"""Interactive OpenGL scene with an orbit camera, a movable point light and a prism model."""

__version__ = "0.1.0"
__all__ = ["vector3", "events", "camera", "light", "scene", "hud", "engine", "app"]