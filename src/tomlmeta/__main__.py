"""Module entrypoint for ``python -m tomlmeta``."""

from tomlmeta.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
