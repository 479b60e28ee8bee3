import os

DEBUG_ONLY = False

# Sample triangles shipped with the package, searched when a name isn't a path on disk
TRIANGLES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "triangles")
DEFAULT_SEARCH_DIRS = [TRIANGLES_DIR]

STDIN_SOURCE_NAME = "-"

# Optionally signed, ASCII digits only. int() alone would also take "1_000" and non-ASCII digits
INTEGER_TOKEN_PATTERN = r"[+-]?[0-9]+"

RESULT_MESSAGE = "The heaviest path is: "

EXIT_OK = 0
EXIT_TRIANGLE_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

STATS_FLAGS = set(["s", "stats", "-s", "--stats"])
COUNT_FIRST_FLAGS = set(["c", "count", "-c", "--count"])
HELP_FLAGS = set(["h", "help", "-h", "--help"])
QUIT_RESPONSES = set(["q", "quit", "-q"])
