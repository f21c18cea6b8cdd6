"""Testing – in-memory doubles for the directory ports."""
