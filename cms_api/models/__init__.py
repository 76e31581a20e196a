from cms_api.models.admin import Admin, AdminRole

__all__ = [
    "Admin",
    "AdminRole",
]
