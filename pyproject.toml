[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "couleurnet"
version = "0.1.0"
description = "Count and rank the colours of BMP images, and exchange messages and colour palettes over TCP"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "colour", "palette", "pie chart", "svg", "socket", "tcp", "echo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
couleurnet-color-server = "couleurnet.color_server:main"
couleurnet-color-client = "couleurnet.color_client:main"
couleurnet-echo-server = "couleurnet.echo_server:main"
couleurnet-echo-client = "couleurnet.echo_client:main"

[tool.hatch.build.targets.wheel]
packages = ["couleurnet"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
