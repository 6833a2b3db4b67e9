"""The `lw` command-line interface."""
