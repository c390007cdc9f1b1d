[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphkit"
version = "0.1.0"
description = "GraphQL building blocks: query errors, custom scalars, cache hints and sample resolvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphql", "resolver", "scalar", "cache-control", "errors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
packages = ["graphkit"]

[tool.pytest.ini_options]
addopts = "-ra"
