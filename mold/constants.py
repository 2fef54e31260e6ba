"""
Constants for the mold package.
"""

# Strictness defaults per entry point.
# True raises InvalidFieldError on a non-whitelisted key, False drops the key.
STRICT_BASE_DEFAULT = True      # MutableMold / ImmutableMold base data
STRICT_CHANGES_DEFAULT = True   # change(), changes() and immutable changes
STRICT_INITIAL = True           # PatchMold initial data, not configurable
STRICT_PATCH_DEFAULT = False    # PatchMold.apply_patch()
