[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "merklepath"
version = "0.1.0"
description = "Keccak-256 Merkle path verification with ABI-encoded public values"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["merkle", "keccak256", "merkle-proof", "abi", "verification"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
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
]

[project.scripts]
merklepath = "merklepath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["merklepath"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
