"""Course catalog and ordinal input scales."""
