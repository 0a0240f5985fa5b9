# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Run the menu image source audit from the shell.
#
# USAGE:
# ------
#    python -m menu_audit.cli
#    check-menu-image-sources          (installed console script)
#
#   Configuration comes from the environment / .env file:
#    MONGODB_URI=mongodb://localhost:27017
#    DB_NAME=maraksh
#
# EXIT CODES:
# -----------
#    0 → report printed
#    1 → configuration, connection or query error (details on stderr)
#
# ==============================================

import sys

from menu_audit.config import load_config
from menu_audit.report import ReportGenerator
from menu_audit.storage import ConfigError


def main() -> int:
    try:
        config = load_config()
    except ConfigError as e:
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0 if ReportGenerator(config).run() else 1


if __name__ == "__main__":
    sys.exit(main())
