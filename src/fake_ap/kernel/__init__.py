"""Kernel – errors and time primitives shared by every component."""
