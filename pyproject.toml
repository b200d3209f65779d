[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asterixkit"
version = "0.1.0"
description = "Decoder for EUROCONTROL ASTERIX surveillance data blocks, records and Mode S Comm-B registers"
requires-python = ">=3.10"
dependencies = []
keywords = ["asterix", "eurocontrol", "surveillance", "radar", "mode-s", "comm-b", "bds", "decoder"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["asterixkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
