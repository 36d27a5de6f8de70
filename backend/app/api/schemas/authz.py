"""Authorization record schemas accepted by the API."""

from __future__ import annotations

from pydantic import Field

from app.validation.fields import StrictRecord


class Action(StrictRecord):
    """A service/method pair a permission grants."""

    __json_tags__ = ("service", "method")

    service: str
    method: str


class Permission(StrictRecord):
    """A single grant inside a role."""

    __json_tags__ = ("id", "description", "action", "constraints,omitempty")
    __optional_fields__ = frozenset({"description", "constraints"})

    id: str
    description: str = ""
    action: Action
    constraints: dict[str, str] = Field(default_factory=dict)


class Role(StrictRecord):
    """Named set of permissions."""

    __json_tags__ = ("id", "description", "permissions")
    __optional_fields__ = frozenset({"description"})

    id: str
    description: str = ""
    permissions: list[Permission]


class Resource(StrictRecord):
    """Node in the resource hierarchy, addressed by its slash-separated path."""

    __json_tags__ = ("name", "path,omitempty", "description", "subresources")
    __optional_fields__ = frozenset({"path", "description", "subresources"})

    name: str
    path: str = ""
    description: str = ""
    subresources: list[Resource] = Field(default_factory=list)


class Policy(StrictRecord):
    """Grants the listed roles on the listed resource paths."""

    __json_tags__ = ("id", "description", "resource_paths", "role_ids")
    __optional_fields__ = frozenset({"description"})

    id: str
    description: str = ""
    resource_paths: list[str]
    role_ids: list[str]


class User(StrictRecord):
    __json_tags__ = ("name", "email,omitempty", "groups", "policies")
    __optional_fields__ = frozenset({"email", "groups", "policies"})

    name: str
    email: str = ""
    groups: list[str] = Field(default_factory=list)
    policies: list[str] = Field(default_factory=list)


class Group(StrictRecord):
    __json_tags__ = ("name", "users", "policies")
    __optional_fields__ = frozenset({"users", "policies"})

    name: str
    users: list[str] = Field(default_factory=list)
    policies: list[str] = Field(default_factory=list)


class Client(StrictRecord):
    """OAuth client registered with the authorization service."""

    __json_tags__ = ("clientID", "policies")
    __optional_fields__ = frozenset({"policies"})

    client_id: str = Field(alias="clientID")
    policies: list[str] = Field(default_factory=list)


Resource.model_rebuild()
