"""Directory to LLM context conversion utilities.

This package walks a directory, renders an ASCII tree of its structure and
concatenates the text of its non-ignored files, producing two documents suitable
for handing a code base to a Large Language Model (LLM) as context.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("source-to-llm")
except PackageNotFoundError:
    __version__ = "unknown"
