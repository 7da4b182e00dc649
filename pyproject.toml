[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tbxdemos"
version = "0.1.0"
description = "Small data-handling demos: a dynamic array, a FIFO buffer, random data and an encrypted, checksummed data vault."
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "dynamic array",
    "fifo",
    "queue",
    "random",
    "crc16",
    "aes",
    "hexdump",
    "demo",
]
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
test = [
    "pytest",
]

[project.scripts]
tbx-dynamicarray = "tbxdemos.dynamicarray:main"
tbx-fifobuffer = "tbxdemos.fifobuffer:main"
tbx-randomdata = "tbxdemos.randomdata:main"
tbx-securedata = "tbxdemos.securedata:main"

[tool.hatch.build.targets.wheel]
packages = ["tbxdemos"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
