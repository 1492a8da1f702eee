[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mlxkit"
version = "0.1.0"
description = "Headless RGBA images, XPM42 loading, depth-sorted render queue and a frame-loop context, with small string and line-reading helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "image", "rgba", "xpm42", "render-queue", "pixels", "strings"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mlxkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
