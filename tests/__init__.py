"""
Test suite for the Doctors Portal service.

Contains unit and API tests for the application's functionality.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
