#!/usr/bin/env python3
"""Validate the eid import graph.

Checks:
1. No circular dependencies
2. Layer rules respected (lower → higher forbidden)

The exceptions import identity, identity imports config. Any edge pointing the
other way turns into a partially initialised module at import time.
"""

import ast
import sys
from pathlib import Path

# Layer definitions (lowest first)
LAYERS = {
    0: ["eid/core/config.py", "eid/core/formatting.py"],
    1: ["eid/core/identity.py"],
    2: ["eid/core/exceptions.py"],
    3: ["eid/preconditions.py"],
    4: ["eid/cli.py", "eid/__main__.py"],
}


def get_module_layer(module_path: str) -> int | None:
    """Determine which layer a module belongs to."""
    for layer, patterns in LAYERS.items():
        for pattern in patterns:
            if module_path.removesuffix(".py") == pattern.removesuffix(".py"):
                return layer
    return None


def extract_imports(file_path: Path) -> list[str]:
    """Extract all absolute imports from a Python file."""
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except (SyntaxError, UnicodeDecodeError):
        return []

    imports = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append(alias.name)
        elif isinstance(node, ast.ImportFrom):
            if node.module and node.level == 0:
                imports.append(node.module)

    return imports


def check_circular_deps(imports: dict[str, set[str]]) -> list[str]:
    """Detect circular dependencies using DFS."""
    errors = []

    def visit(module: str, path: list[str]) -> None:
        if module in path:
            cycle = " → ".join(path + [module])
            errors.append(f"CIRCULAR DEPENDENCY: {cycle}")
            return

        if module not in imports:
            return

        for dep in imports[module]:
            visit(dep, path + [module])

    for module in imports:
        visit(module, [])

    return errors


def check_layer_violations(file_path: Path, imports: list[str], repo_root: Path) -> list[str]:
    """Check if imports violate layer rules (lower → higher forbidden)."""
    errors = []

    rel_path = file_path.relative_to(repo_root).as_posix()
    module_layer = get_module_layer(rel_path)

    if module_layer is None:
        return []  # Not in layer system (e.g., package __init__)

    for imp in imports:
        if not imp.startswith("eid."):
            continue  # External import

        import_layer = get_module_layer(imp.replace(".", "/"))

        if import_layer is None:
            continue  # Import not in layer system

        # Check: can only import from same or lower layer
        if import_layer > module_layer:
            errors.append(f"LAYER VIOLATION: {rel_path} (layer {module_layer}) imports {imp} (layer {import_layer})")

    return errors


def validate(repo_root: Path) -> tuple[list[str], int]:
    """Return (errors, number of files checked)."""
    errors = []
    python_files = [f for f in repo_root.glob("eid/**/*.py") if "__pycache__" not in f.parts]

    all_imports: dict[str, set[str]] = {}
    for file in python_files:
        imports = extract_imports(file)
        module_name = file.relative_to(repo_root).with_suffix("").as_posix().replace("/", ".")
        all_imports[module_name] = set(imports)
        errors.extend(check_layer_violations(file, imports, repo_root))

    errors.extend(check_circular_deps(all_imports))
    return errors, len(python_files)


def main(repo_root: Path | None = None) -> int:
    root = repo_root or Path(__file__).parent.parent

    print("Validating code dependencies...")
    errors, checked = validate(root)

    if errors:
        print("\nDependency validation failed:\n")
        for error in errors:
            print(f"  {error}")
        print(f"\n{len(errors)} violation(s) found.")
        return 1

    print("No circular dependencies or layer violations detected.")
    print(f"   Checked {checked} Python files.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
