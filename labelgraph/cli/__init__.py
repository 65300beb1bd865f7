"""Command line glue around the graph library."""
