"""
Shared utilities.

- http.py      - requests session with retry/backoff, ``get_json`` helper
- isolation.py - propagate / degrade wrappers applied per analysis source
"""
