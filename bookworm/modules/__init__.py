"""
Bookworm domain modules: catalog, user_management and lending.
"""
