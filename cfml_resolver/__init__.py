"""Dotted component path resolution and document link extraction for CFML projects."""
