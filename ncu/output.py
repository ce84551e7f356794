"""Console output for summaries."""

import os


# ANSI color codes
CYAN = '\033[96m'
BOLD = '\033[1m'
RESET = '\033[0m'

TABLE_LABEL_WIDTH = 12


class ConsoleOutput:
    """Prints log lines and two-column table rows to stdout."""

    def __init__(self, use_color: bool = None):
        """Initialize the console output.

        Args:
            use_color: Whether to use ANSI colors (default: on unless NO_COLOR is set)
        """
        if use_color is None:
            use_color = 'NO_COLOR' not in os.environ
        self.use_color = use_color

    def log(self, *args):
        print(*args)

    def table(self, label: str, value: str):
        """Print one table row with the label padded to a fixed width."""
        padded = f"{label:<{TABLE_LABEL_WIDTH}}"
        if self.use_color:
            print(f"{BOLD}{CYAN}{padded}{RESET} {value}")
        else:
            print(f"{padded} {value}")

    def separator(self, title: str = ''):
        """Print a horizontal rule, optionally followed by a heading."""
        print("-" * 80)
        if title:
            print(f"{BOLD}{title}{RESET}" if self.use_color else title)
