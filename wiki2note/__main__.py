"""Entry point for running wiki2note as a module: python -m wiki2note"""

from wiki2note.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
