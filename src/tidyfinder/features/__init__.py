"""Feature slices for TidyFinder."""
