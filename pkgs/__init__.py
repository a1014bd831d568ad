"""Library packages: GCD core and observability."""
