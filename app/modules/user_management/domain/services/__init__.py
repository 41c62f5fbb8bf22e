# 📄 File: app/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the business operations on user records.
# 🧪 Purpose (Technical Summary):
# Domain services package exporting UserService.
# 🔗 Dependencies:
# Domain models, repository interfaces, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Presentation dependencies, demo seed

from .user_service import UserService

__all__ = ["UserService"]
