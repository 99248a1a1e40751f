"""XML report formatters."""
