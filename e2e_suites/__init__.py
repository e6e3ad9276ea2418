"""
E2E suites package.

This repository intentionally keeps `e2e_suites` importable to support:
  - IDE navigation
  - page objects shared between specs and unit tests
  - CI/CD module imports

All content is demo-safe and does not include production secrets.
"""
