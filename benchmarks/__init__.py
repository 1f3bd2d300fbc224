"""Benchmarks for tinydsp filters and windows."""
