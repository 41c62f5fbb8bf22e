# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the version 1 API folder as a package that groups the endpoints clients talk to.
# 🧪 Purpose (Technical Summary):
# API v1 package: the aggregated router (router.py) and the health endpoints (health.py).
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main.py, app.api.middleware.rate_limiting

"""
API Version 1

- router.py: mounts the user routes under ``/api/v1/users`` and serves ``/api/v1/docs``
- health.py: ``/health``, ``/health/ready`` and ``/health/live``
"""
