"""
Tests package - test suite for the Keycloak realm provider.

Contains:
- unit/: Unit tests for individual components
- fixtures/: Sample realm documents and an in-memory Admin API stand-in
"""
