"""API schema package."""

from app.api.schemas.authz import Action, Client, Group, Permission, Policy, Resource, Role, User

__all__ = ["Action", "Permission", "Role", "Resource", "Policy", "User", "Group", "Client"]
