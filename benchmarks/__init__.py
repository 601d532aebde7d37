"""
Benchmark suite for stojson parsing performance.

Compares stojson against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Also compares the key extractor with a full parse for single-field reads.
"""
