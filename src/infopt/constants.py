"""Global constants for infopt.

This module centralizes important constants used throughout the package
to ensure consistency and prevent duplication.
"""

# Name index entry for a name shared by more than one live parameter
AMBIGUOUS_INDEX: int = -1

# Display names of grouped parameters look like "theta[1]" or "x[1,2]"
INDEX_OPEN: str = "["

# Keywords accepted by the parameter specification builder
PARAMETER_KEYWORDS = ("lower_bound", "upper_bound", "distribution", "set")

# Default number of support points drawn per parameter
DEFAULT_NUM_SUPPORTS: int = 10
