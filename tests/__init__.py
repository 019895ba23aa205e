"""
Test Suite for Member Searcher.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Service-level tests against the in-memory backend

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
