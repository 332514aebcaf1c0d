[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadpart"
version = "0.1.0"
description = "Rectangular area partitioning with a scalable quadtree, plus a channel graph of touching partitions"
requires-python = ">=3.10"
dependencies = []
keywords = ["quadtree", "partitioning", "spatial", "region", "channel graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quadpart = "quadpart.cli:main"
quadpart-channel-graph = "quadpart.channel_graph:main"
quadpart-construct = "quadpart.construct:main"
quadpart-marking = "quadpart.marking:main"

[tool.hatch.build.targets.wheel]
packages = ["quadpart"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
