"""Benchmarks package — uses pytest-benchmark (``pip install -e ".[bench]"``).

``bench_*.py`` files are not collected by the default run; name them::

    pytest tests/benchmarks/bench_pipeline.py -v --benchmark-sort=median
    pytest tests/benchmarks/bench_pipeline.py --benchmark-disable
"""
