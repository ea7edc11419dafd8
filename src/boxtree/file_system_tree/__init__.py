"""Directory tree traversal and rendering.

This package walks a directory depth-first and renders each visible entry as one
line of a box-drawing tree, with support for depth limits, directory-only listings
and exclusion patterns.
"""
