[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filevault"
version = "0.1.0"
description = "Menu-driven multi-user file vault that stores files run-length compressed and XOR-scrambled"
requires-python = ">=3.10"
dependencies = []
keywords = ["vault", "file storage", "run-length encoding", "xor", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filevault = "filevault.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["filevault"]

[tool.pytest.ini_options]
addopts = "-ra"
