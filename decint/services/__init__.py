"""Services Layer — settings-bound facade over the pure core."""
