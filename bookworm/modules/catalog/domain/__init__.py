"""
Catalog Domain Layer
"""
