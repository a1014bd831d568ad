"""Application packages built on the GCD engine."""
