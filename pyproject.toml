[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vintfkit"
version = "0.1.0"
description = "Data model for vendor interface manifests and compatibility matrices: enumerations, versions, flags, XML file entries and HAL groups."
requires-python = ">=3.10"
dependencies = []
keywords = ["vintf", "hal", "manifest", "compatibility-matrix", "versioning"]
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
packages = ["vintfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
