"""
Unit Tests for MinimaxBot

This package contains unit tests for all bot components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_evaluation.py

    # Run with coverage
    pytest tests/ --cov=minimax_bot --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
