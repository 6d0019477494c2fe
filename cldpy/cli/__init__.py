"""cldpy command line interface."""
