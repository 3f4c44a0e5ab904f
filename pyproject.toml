[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wirestack"
version = "0.1.0"
description = "A push_swap stack-sorting solver and checker, with number and colour helpers for wireframe height maps"
requires-python = ">=3.10"
keywords = ["push_swap", "sorting", "stacks", "lis", "height-map", "colour"]
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
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wirestack-push-swap = "wirestack.pushswap.solver:main"
wirestack-checker = "wirestack.pushswap.checker:main"

[tool.hatch.build.targets.wheel]
packages = ["wirestack"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
