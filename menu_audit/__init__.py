# ==============================================
# Menu Image Source Audit
# ==============================================
#
# Package Structure:
#
# menu_audit/
# ├── storage/          # MongoDB connection + error types
# ├── analysis/         # Classify menu item image references
# ├── config.py         # Configuration management
# ├── report.py         # Report generator (connect → load → classify → print)
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
