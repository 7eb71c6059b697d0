"""Console presentation for simulation runs."""
