[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridreinforce"
version = "0.1.0"
description = "REINFORCE policy-gradient agent learning to navigate a small grid world"
requires-python = ">=3.10"
dependencies = []
keywords = ["reinforcement-learning", "reinforce", "policy-gradient", "grid-world"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridreinforce = "gridreinforce.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gridreinforce"]

[tool.pytest.ini_options]
addopts = "-ra"
