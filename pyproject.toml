[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gpgmm"
version = "0.1.0"
description = "Building blocks for GPU memory management: alignment math, flags, intrusive lists, reference counting, logging, platform helpers and residency sets."
requires-python = ">=3.10"
dependencies = []
keywords = ["gpu", "memory", "alignment", "residency", "refcount", "linked-list", "logging"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gpgmm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
