"""Browser-facing JSON API for py-disk.

This package provides a Flask application that runs simulations over
HTTP.  It is an **optional** extra — install with::

    pip install py-disk[web]

The ``create_app`` factory in ``app.py`` serves two endpoints:

- ``GET /api/config`` — the active simulation settings.
- ``GET /api/simulate`` — run one comparison and return the totals.
"""
