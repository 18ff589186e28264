[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algorithmia"
version = "0.1.0"
description = "Classic algorithms: convex hull, segment intersection, shortest paths, maximum flow, string search and dynamic programming."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "convex-hull",
    "graham-scan",
    "segment-intersection",
    "floyd-warshall",
    "ford-fulkerson",
    "kmp",
    "rabin-karp",
    "merge-sort",
    "matrix-chain",
    "maximum-subarray",
    "activity-selection",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
algorithmia-hull = "algorithmia.convex_hull:main"
algorithmia-segments = "algorithmia.segments:main"
algorithmia-floyd = "algorithmia.floyd:main"
algorithmia-maxflow = "algorithmia.max_flow:main"

[tool.hatch.build.targets.wheel]
packages = ["algorithmia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
