"""
User Management Domain Layer

Entities, value objects, repository contracts and domain services for accounts.
"""
