"""
Core value types, domain models and contracts.

Pure building blocks with no knowledge of the presentation layer.
"""
