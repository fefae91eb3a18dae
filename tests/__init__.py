"""
Test suite for dimensional-algebra

Contains:
- tests/unit/          : Unit tests for codec, signature algebra, catalog, parser, classifier, contracts
"""
