[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treeexplorer"
version = "1.0.0"
description = "An unbalanced binary search tree set with inorder, preorder and postorder traversal."
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "bst", "set", "tree traversal", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["treeexplorer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
