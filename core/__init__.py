# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the data and query logic of the cat database.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or touches stdin/stdout.  The
#   models, the dataset and the queries are plain Python and can be used
#   (and tested) from a bare REPL.
# =============================================================================
