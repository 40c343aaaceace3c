"""infopt: Infinite parameters for infinite-dimensional optimization models.

This package provides the parameter layer of an infinite optimization
modeling framework: infinite sets, parameter declaration and storage,
bound access, and validation of parameter dependency tuples.
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401
