[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortbench"
version = "0.1.0"
description = "Benchmark classic sorting algorithms on generated number and word data sets"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "benchmark", "algorithms", "bubble sort", "merge sort", "quick sort"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
sortbench = "sortbench.benchmark:main"
sortbench-generate = "sortbench.generate:main"

[tool.hatch.build.targets.wheel]
packages = ["sortbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
