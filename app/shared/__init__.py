# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools that every part
# of the app can use, like settings, database connections and error types.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, infrastructure
# and cross-cutting concerns used by the application modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management (settings, database engine options)
- Database connection and session management
- Exception taxonomy and password hashing
- Logging, response formatting and validation helpers
"""

__all__ = []
