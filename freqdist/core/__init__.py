"""
Core domain models, numeric primitives, and contracts.

This module contains the frequency distribution calculator and the building
blocks it depends on. It is independent of file formats and presentation.
"""
