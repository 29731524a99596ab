[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "ossim"
version = "0.1.0"
description = "Small operating-system simulations (CPU scheduling, page replacement) and practice utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "fcfs", "round-robin", "page-replacement", "fifo", "mfu", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ossim-scheduler = "ossim.scheduler:main"
ossim-paging = "ossim.paging:main"

[tool.setuptools.packages.find]
include = ["ossim*"]

[tool.pytest.ini_options]
addopts = "-ra"
