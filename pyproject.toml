[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodify"
version = "0.1.0"
description = "Explore implicit graphs with depth-first, parallel depth-first and delta-stepping shortest-path search"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "graph", "dfs", "shortest-path", "delta-stepping", "search"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nodify-fibonacci = "nodify.fibonacci:main"
nodify-frog = "nodify.frog:main"
nodify-knapsack = "nodify.knapsack:main"

[tool.hatch.build.targets.wheel]
packages = ["nodify"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
