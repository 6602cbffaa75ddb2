"""Defines common Value Objects used across the layers.

Using NewType for semantic clarity, although they are plain str/int at runtime.
"""

from typing import NewType

FilePath = NewType("FilePath", str)          # Path to the data file
FileContent = NewType("FileContent", str)    # Full content of a file
OutputLine = NewType("OutputLine", str)      # One line written to standard output
BarkCount = NewType("BarkCount", int)        # How many times a dog barks
