[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zengine"
version = "0.1.0"
description = "Vector maths, cameras, camera controllers, input devices, layers and meshes for a small 2D/3D graphics engine"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["graphics", "rendering", "camera", "quaternion", "input", "layers", "game-engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
