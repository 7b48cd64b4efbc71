"""
Applicant Registry Test Suite
=============================

Test organization:
- tests/unit/          - Unit tests (no external dependencies)

Run tests:
    pytest                                   # All tests
    pytest tests/unit                        # Unit tests only
    pytest --cov=applicant_registry          # With coverage
"""
