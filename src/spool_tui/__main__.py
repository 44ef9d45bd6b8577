# =============================================================================
# Spool-TUI Entry Point for `python -m spool_tui`
# =============================================================================
# This module allows Spool-TUI to be run as a Python module:
#
#   python -m spool_tui
#
# This is equivalent to running the 'spool-tui' command after installation.
# =============================================================================

import sys

from spool_tui.app import main

if __name__ == "__main__":
    sys.exit(main())
