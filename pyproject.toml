[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tackit"
version = "0.1.0"
description = "Three-address code examples, optimisation passes, 8086 code emission and string utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "three-address code", "tac", "copy propagation", "8086", "codegen"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tackit-strings = "tackit.strings:main"
tackit-gentac = "tackit.gentac:main"
tackit-optimise = "tackit.tac:main"
tackit-copyprop = "tackit.copyprop:main"
tackit-8086 = "tackit.codegen8086:main"

[tool.hatch.build.targets.wheel]
packages = ["tackit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
