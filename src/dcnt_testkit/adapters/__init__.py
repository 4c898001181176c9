"""Adapters – concrete implementations of kernel ports."""
