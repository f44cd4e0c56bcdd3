"""
eosvalidate Test Suite
======================

Test Organization
-----------------
- tests/unit/          : Fast unit tests (no external dependencies)

Testing Philosophy
------------------
- Table-driven rule tests: one row per accepted or rejected value
- Use pytest markers to categorize and selectively run tests
- Follow AAA pattern: Arrange, Act, Assert
"""
