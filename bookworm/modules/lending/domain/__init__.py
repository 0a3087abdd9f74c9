"""
Lending Domain Layer
"""
