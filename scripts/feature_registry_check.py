"""ENVKNOB FILE PURPOSE
Purpose: policy checks for feature modules (FEATURE contract, no cross-feature imports,
    environment read only through the KnobRegistry).
Hot path: no.
"""

from __future__ import annotations

import ast
import re
import sys
from pathlib import Path

RE_ENV = re.compile(r"ENVKNOB_FEATURE_[A-Z0-9_]+")

REQUIRED = {"key", "router", "enabled_env"}

ENV_CALLS = {"getenv", "environ", "putenv", "unsetenv"}


def fail(msg: str) -> None:
    print(f"FEATURE_CHECK_FAIL: {msg}", file=sys.stderr)
    raise SystemExit(1)


def check_file(path: Path) -> None:
    src = path.read_text(encoding="utf-8")
    tree = ast.parse(src, filename=str(path))

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for a in node.names:
                if a.name == "features" or a.name.startswith("features."):
                    fail(f"cross-feature import in {path}")
        if isinstance(node, ast.ImportFrom):
            if node.level and node.level > 0:
                fail(f"relative import not allowed in {path}")
            mod = node.module or ""
            if mod == "features" or mod.startswith("features."):
                fail(f"cross-feature import in {path}")
            if mod == "os" and any(a.name in ENV_CALLS for a in node.names):
                fail(f"direct environment access in {path}; use KnobRegistry")
        if isinstance(node, ast.Attribute):
            if isinstance(node.value, ast.Name) and node.value.id == "os" and node.attr in ENV_CALLS:
                fail(f"direct environment access in {path}; use KnobRegistry")

    # FEATURE dict (best-effort)
    if "FEATURE" not in src:
        fail(f"FEATURE missing in {path}")
    for k in sorted(REQUIRED):
        if f"'{k}'" not in src and f'"{k}"' not in src:
            fail(f"FEATURE missing key {k} in {path}")
    if not RE_ENV.search(src):
        fail(f"enabled_env missing/invalid in {path}")


def main(feat_dir: Path = Path("features")) -> None:
    for path in sorted(feat_dir.glob("*.py")):
        if path.name.startswith("_"):
            continue
        check_file(path)

    print("FEATURE_CHECK_OK")


if __name__ == "__main__":
    main(Path(sys.argv[1]) if len(sys.argv) > 1 else Path("features"))
