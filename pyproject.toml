[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ionik"
version = "0.1.0"
description = "Local files, WAV frame views, system metric records and video capture device descriptions"
requires-python = ">=3.10"
dependencies = []
keywords = ["file", "wav", "audio", "metrics", "video", "capture", "v4l2"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ionik"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
