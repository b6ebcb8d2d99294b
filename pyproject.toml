[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Small classic algorithms: BST validation, AVL trees, KMP search, grid path finding and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "avl", "kmp", "dijkstra", "bfs", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-bstcheck = "algolab.bstcheck:main"
algolab-tilings = "algolab.tilings:main"
algolab-kmp = "algolab.kmp:main"
algolab-usernames = "algolab.usernames:main"
algolab-trees = "algolab.trees:main"
algolab-zoomba = "algolab.zoomba:main"
algolab-pathfinding = "algolab.pathfinding:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
addopts = "-ra"
