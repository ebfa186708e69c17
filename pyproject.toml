[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kglab"
version = "0.1.0"
description = "Interactive OpenGL scene with an orbit camera, a movable point light and a prism model"
requires-python = ">=3.10"
keywords = ["opengl", "pyglet", "3d", "camera", "lighting", "graphics"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Environment :: X11 Applications",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = ["pyglet"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kglab = "kglab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["kglab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
