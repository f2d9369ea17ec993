#!/usr/bin/env python
"""
Thin wrapper script to invoke the genie_fun CLI.

Running ``python genie-fun.py`` is equivalent to running the
``genie-fun`` console script installed via ``pyproject.toml``.
"""

from genie_fun.cli import main


if __name__ == "__main__":
    main(prog_name="genie-fun")
