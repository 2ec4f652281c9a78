"""Tool functions returning JSON-serialisable dicts."""
