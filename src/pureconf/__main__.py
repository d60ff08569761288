"""Module entrypoint for ``python -m pureconf``."""

from __future__ import annotations

from pureconf.main import cli_entrypoint

if __name__ == "__main__":
    raise SystemExit(cli_entrypoint())
