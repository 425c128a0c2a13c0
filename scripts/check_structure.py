#!/usr/bin/env python3
"""Simple structural sanity check for the package layout.

Validates that sources live in the expected locations and that the
package holds exactly the expected modules.
"""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

EXPECTED_MODULES = {
    "config.py",
    "error_codes.py",
    "formatting.py",
    "inserter.py",
    "masked_input.py",
    "parse_mask.py",
    "predicates.py",
    "processor.py",
    "selection_editor.py",
    "state.py",
    "ui_utils.py",
}


def main(root: Path = ROOT) -> int:
    errors: list[str] = []

    def expect(path: Path, kind: str) -> None:
        if not path.exists():
            errors.append(f"missing {kind}: {path}")

    package_dir = root / "input_mask"

    expect(root / "pyproject.toml", "pyproject.toml")
    expect(root / "tests", "tests/")
    expect(package_dir / "__init__.py", "input_mask/__init__.py")

    if not package_dir.is_dir():
        errors.append(f"package directory is missing: {package_dir}")
    else:
        present = {p.name for p in package_dir.glob("*.py")}
        missing = sorted(EXPECTED_MODULES - present)
        extra = sorted(present - EXPECTED_MODULES - {"__init__.py"})
        if missing:
            errors.append(f"modules missing: {', '.join(missing)}")
        if extra:
            errors.append(f"unexpected modules in input_mask/: {', '.join(extra)}")

    legacy_pkg = root / "modules"
    if legacy_pkg.exists():
        errors.append(f"legacy package should not exist: {legacy_pkg}")

    if errors:
        for e in errors:
            print(f"[structure] {e}", file=sys.stderr)
        return 1
    print("[structure] OK: layout matches expected shape")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
