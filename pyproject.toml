[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "smartcalc"
version = "1.0.0"
description = "Expression calculator with reverse Polish conversion, plotting data, and loan and deposit calculators"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "calculator",
    "reverse-polish-notation",
    "shunting-yard",
    "expression",
    "loan",
    "annuity",
    "deposit",
    "interest",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smartcalc = "smartcalc.cli:main"

[tool.setuptools]
packages = ["smartcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
