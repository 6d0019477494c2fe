"""Core building blocks of the cldpy client."""
