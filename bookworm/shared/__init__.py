"""
Shared kernel for the Bookworm domain.
Configuration, error taxonomy, security and logging utilities used by every module.
"""
