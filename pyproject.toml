[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "encdir"
version = "0.1.0"
description = "Re-encode text files between code pages and break down directory sizes"
requires-python = ">=3.10"
dependencies = []
keywords = ["encoding", "code page", "utf-8", "utf-16", "shift_jis", "gbk", "big5", "disk usage", "directory size"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Text Processing :: General",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
encdir = "encdir.cli:main"

[tool.setuptools]
packages = ["encdir"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
