"""Dataset acquisition.

This package resolves catalog categories to remote datasets, fetches
and decodes them, and orchestrates imports into the storage tree.
"""
