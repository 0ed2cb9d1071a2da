"""
Tests for geoprim

This package contains unit tests for:
- Closest-point and distance queries
- Separating-axis and extreme-point utilities
- Point-set statistics and the Jacobi eigen solver
- Oriented bounding boxes and mesh queries
- Policy dataclasses
"""
