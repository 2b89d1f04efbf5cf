#!/usr/bin/env python3
"""Enforce barrel export budgets and that every exported name is imported."""

from __future__ import annotations

import argparse
import ast
from pathlib import Path


DEFAULT_BUDGETS = {
    "adam/__init__.py": 10,
    "adam/api/__init__.py": 20,
}


def _extract_all(tree: ast.AST) -> list[str] | None:
    for node in tree.body if isinstance(tree, ast.Module) else []:
        if isinstance(node, ast.Assign):
            for target in node.targets:
                if isinstance(target, ast.Name) and target.id == "__all__":
                    if isinstance(node.value, (ast.List, ast.Tuple)):
                        return [
                            elt.value
                            for elt in node.value.elts
                            if isinstance(elt, ast.Constant) and isinstance(elt.value, str)
                        ]
    return None


def _imported_names(tree: ast.AST) -> set[str]:
    names: set[str] = set()
    for node in tree.body if isinstance(tree, ast.Module) else []:
        if isinstance(node, ast.ImportFrom):
            names.update(alias.asname or alias.name for alias in node.names)
    return names


def check_barrel(path: Path, budget: int) -> list[str]:
    """Return violations for one barrel module."""
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    exported = _extract_all(tree)
    if exported is None:
        return [f"{path}: missing literal __all__"]
    violations: list[str] = []
    if len(exported) > budget:
        violations.append(f"{path}: __all__ size {len(exported)} exceeds budget {budget}")
    missing = sorted(set(exported) - _imported_names(tree))
    for name in missing:
        violations.append(f"{path}: __all__ lists {name!r} but never imports it")
    return violations


def main() -> int:
    parser = argparse.ArgumentParser(description="Check barrel export budgets.")
    parser.add_argument("--root", default=".", help="Repository root.")
    args = parser.parse_args()

    root = Path(args.root)
    violations: list[str] = []
    for rel_path, budget in DEFAULT_BUDGETS.items():
        path = root / rel_path
        if not path.exists():
            continue
        violations.extend(check_barrel(path, budget))

    if violations:
        print("Barrel export violations:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
