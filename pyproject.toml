[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "incomelogit"
version = "0.1.0"
description = "Income classification on census-style CSV data with tuned logistic regression"
requires-python = ">=3.10"
keywords = ["logistic regression", "classification", "census", "income", "machine learning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
incomelogit = "incomelogit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["incomelogit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
