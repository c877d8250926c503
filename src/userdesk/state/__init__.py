"""State/store layer.

This package is the single source of truth for the user collection: every
change, whether it comes from the seed load or from the editor, is an
action run through the reducer.
"""
