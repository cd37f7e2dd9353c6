"""
Release tools test suite.

- unit/: Tests for individual components in isolation
- integration/: Tests for the CLI driving the whole flow
"""
