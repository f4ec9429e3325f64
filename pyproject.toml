[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chromasock"
version = "0.1.0"
description = "Count the colours of BMP images and send them to a small socket server that draws them as an SVG pie chart"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "colour", "palette", "pie chart", "svg", "socket", "echo server"]
classifiers = [
    "Development Status :: 4 - Beta",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chromasock-server = "chromasock.colorserver:main"
chromasock-client = "chromasock.colorclient:main"
chromasock-echo-server = "chromasock.echo_server:main"
chromasock-echo-client = "chromasock.echo_client:main"
chromasock-exercises = "chromasock.exercises:main"

[tool.hatch.build.targets.wheel]
packages = ["chromasock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
