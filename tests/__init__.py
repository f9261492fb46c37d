"""Test suite for the catalog API.

Test structure follows the test pyramid:
- unit/: Unit tests - domain rules, handlers, and adapters in isolation
- api/: API endpoint tests - HTTP behavior with handlers stubbed
- integration/: Integration tests - repositories against PostgreSQL
"""
