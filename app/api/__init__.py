# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file marks the api folder as a Python package, like a table of contents for the
# web-facing parts of the app.
# 🧪 Purpose (Technical Summary):
# Package initialization for the HTTP layer: middleware components and versioned routers.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main.py

"""
User Records API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/          # Error handling, request logging, rate limiting
    └── v1/                  # API version 1
        ├── router.py        # Main v1 router and endpoint index
        └── health.py        # Health check endpoints (mounted at the root)
"""

API_PREFIX = "/api"
CURRENT_VERSION = "v1"

__all__ = [
    "API_PREFIX",
    "CURRENT_VERSION",
]
