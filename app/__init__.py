"""RBAC directory service: users, roles and user-role assignments over FastAPI."""
