from __future__ import annotations

# Console contract constants shared by both command source variants.
EXIT_COMMAND = "exit"
PROMPT = "> "
ERROR_PREFIX = "Error: "
CLOSE_ERROR_PREFIX = "Error closing file: "

# Batch display_error terminates the run with this status.
FATAL_EXIT_STATUS = 1
