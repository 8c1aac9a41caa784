"""Launcher for ``python -m repo_pdf``."""

from repo_pdf.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
