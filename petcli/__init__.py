"""petcli: loads a dog record from a data file and prints what it can do."""

__version__ = "0.1.0"
