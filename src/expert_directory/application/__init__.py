"""Application layer – filter state, facets, pagination and the search session."""
