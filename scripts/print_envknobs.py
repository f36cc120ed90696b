"""Print the environment knobs currently in play.

Reads every well-known knob plus any names given on the command line, then
prints one `envknob: NAME="value"` line per set knob, sorted by name.
Exit: 0 on success, 1 if a knob holds a malformed value.

Supported invocation from repo root:
  python scripts/print_envknobs.py [--bool NAME] [--int NAME] [--string NAME]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from envknob.knobs import KnobRegistry  # noqa: E402
from envknob.wellknown import touch_all  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("--bool", action="append", default=[], metavar="NAME")
    ap.add_argument("--int", action="append", default=[], metavar="NAME")
    ap.add_argument("--string", action="append", default=[], metavar="NAME")
    args = ap.parse_args(argv)

    knobs = KnobRegistry()
    knobs.set_in_main()

    touch_all(knobs)
    for name in args.bool:
        knobs.bool(name)
    for name in args.int:
        knobs.lookup_int(name)
    for name in args.string:
        knobs.string(name)

    knobs.log_current(print)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
