[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fhetoolkit"
version = "0.1.0"
description = "Boolean-circuit C++ emitter and plaintext reference programs for homomorphic computation examples"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "homomorphic encryption",
    "boolean circuits",
    "code generation",
    "transpiler",
    "examples",
]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fhetoolkit-calculator = "fhetoolkit.calculator:main"
fhetoolkit-fibonacci = "fhetoolkit.fibonacci:main"
fhetoolkit-rock-paper-scissor = "fhetoolkit.rock_paper_scissor:main"
fhetoolkit-string-reverse = "fhetoolkit.string_reverse:main"
fhetoolkit-hangman = "fhetoolkit.hangman:main"
fhetoolkit-pir = "fhetoolkit.pir:main"

[tool.hatch.build.targets.wheel]
packages = ["fhetoolkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
