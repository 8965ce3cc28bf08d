"""tempstack — route piped text through a persistent stack of temp files.

Captured input lands in numbered slots that survive between runs and can
be printed or overwritten later by index.
"""

from tempstack.version import __version__

__all__: list[str] = ["__version__"]
