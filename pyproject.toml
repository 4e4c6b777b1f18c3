[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rgbifaces"
version = "0.12.0"
description = "Value types of the standard RGB smart contract interfaces: fungible amounts, asset names, NFTs and proofs of reserves"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitcoin", "lightning", "rgb", "smart-contracts", "nft", "fungible"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rgbifaces"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 110
target-version = "py310"
