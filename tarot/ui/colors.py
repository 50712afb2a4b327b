"""
ANSI color codes for terminal output in the tarot library.
Provides consistent color theming for card rendering.
"""


class Colors:
    """ANSI color codes for terminal formatting."""
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    WHITE = '\033[37m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    GREY = '\033[90m'
    RESET = '\033[0m'
