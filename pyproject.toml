[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rijndael-blocks"
version = "0.1.0"
description = "Pure-Python AES-128/192/256 block cipher with ECB and CBC modes over 128-bit integer blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "rijndael", "block cipher", "ecb", "cbc", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "cryptography",
]

[tool.hatch.build.targets.wheel]
packages = ["rijndael_blocks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
