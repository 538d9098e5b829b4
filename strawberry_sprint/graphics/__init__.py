"""Stage node tree and its pygame renderer."""
