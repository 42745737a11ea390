"""Command line interface for executor-resources."""
