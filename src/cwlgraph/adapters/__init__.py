"""Adapters connecting the normalization core to files and remote hosts."""
