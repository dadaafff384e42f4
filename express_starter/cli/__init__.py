"""Express Starter command line interface."""
