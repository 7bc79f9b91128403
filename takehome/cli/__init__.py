"""takehome command-line interface."""
