# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point that tells Python this 'app' folder contains our User Records API code
# and sets up the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata
# for the User Records FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - Package imports throughout the application

"""
User Records API - CRUD REST service for user records

Validated create/read/update/soft-delete operations over a relational
users table, a uniform response envelope, health probes and per-client
rate limiting.
"""

__version__ = "1.0.0"
__title__ = "User Records API"
__description__ = "CRUD REST API for managing user records"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
