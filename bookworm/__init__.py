# 📄 File: bookworm/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'bookworm' folder holds the library rules code and records version information.
#
# 🧪 Purpose (Technical Summary):
# Package initialization with version info for the Bookworm library domain layer.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - Application layers embedding the domain rules
# - Test suite

"""
Bookworm Library - Domain Rules

Catalog, membership and lending rules for a library: self-validating value
objects, duplicate-aware book registration and a structured error taxonomy.
"""

__version__ = "1.0.0"
__title__ = "Bookworm Library Domain"
__description__ = "Library catalog, membership and lending rules"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
