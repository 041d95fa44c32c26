[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solkit"
version = "0.1.0"
description = "A small HTTP service that generates ed25519 keypairs, signs and verifies messages, and builds Solana system and SPL token instructions."
requires-python = ">=3.10"
keywords = ["solana", "ed25519", "spl-token", "http", "api", "base58"]
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
    "Framework :: AsyncIO",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "starlette>=0.37",
    "uvicorn>=0.29",
    "pynacl>=1.5",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "httpx>=0.27",
]

[project.scripts]
solkit = "solkit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["solkit"]

[tool.hatch.build.targets.sdist]
include = ["solkit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
