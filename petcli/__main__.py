"""Main entry point when executing petcli as a package.

This allows running the package using python -m petcli.
"""

from petcli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
