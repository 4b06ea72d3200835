"""
Common utilities for the Todo API: authentication primitives (``auth``),
the credential policy (``validation``), and logging (``logger``).

Submodules are imported directly; ``logger`` must stay importable before
the configuration module has loaded.
"""
