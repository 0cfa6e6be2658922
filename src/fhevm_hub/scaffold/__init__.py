"""Example project scaffolding.

Turns an example catalog key into a self-contained Hardhat project:
contract, test, build config, TypeScript config, package manifest and
README. The generated files carry no timestamps, so regenerating a
project over itself leaves it byte-identical.
"""

# Directories created in every generated project, in creation order
PROJECT_DIRS = (
    "contracts",
    "test",
    "deploy",
    "tasks",
    "scripts",
    "docs",
    ".github/workflows",
    ".vscode",
)
