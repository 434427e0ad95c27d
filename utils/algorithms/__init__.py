"""
Pure algorithms with no domain-specific dependencies.

Modules:
    search      - Lazy depth-first enumeration of implicit graphs, with deduplication
"""
