"""In-memory API entity hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ApiItemKind(str, Enum):
    """Category of an API entity."""

    CALL_SIGNATURE = "CallSignature"
    CLASS = "Class"
    CONSTRUCTOR = "Constructor"
    CONSTRUCT_SIGNATURE = "ConstructSignature"
    ENTRY_POINT = "EntryPoint"
    ENUM = "Enum"
    ENUM_MEMBER = "EnumMember"
    FUNCTION = "Function"
    INDEX_SIGNATURE = "IndexSignature"
    INTERFACE = "Interface"
    METHOD = "Method"
    METHOD_SIGNATURE = "MethodSignature"
    MODEL = "Model"
    NAMESPACE = "Namespace"
    PACKAGE = "Package"
    PROPERTY = "Property"
    PROPERTY_SIGNATURE = "PropertySignature"
    TYPE_ALIAS = "TypeAlias"
    VARIABLE = "Variable"
    NONE = "None"


@dataclass(eq=False)
class ApiItem:
    """A node of the API hierarchy."""

    display_name: str
    kind: ApiItemKind
    parent: ApiItem | None = field(default=None, repr=False)
    members: list[ApiItem] = field(default_factory=list, repr=False)

    def add_member(self, member: ApiItem) -> ApiItem:
        """Attach *member* as the last child of this item and return it."""
        if member.parent is not None:
            raise ValueError(
                f"'{member.display_name}' already belongs to '{member.parent.display_name}'"
            )
        member.parent = self
        self.members.append(member)
        return member

    def find_members_by_name(self, name: str) -> list[ApiItem]:
        return [member for member in self.members if member.display_name == name]

    def get_hierarchy(self) -> list[ApiItem]:
        """Return the ancestor chain, outermost first and this item last."""
        chain: list[ApiItem] = []
        current: ApiItem | None = self
        while current is not None:
            chain.append(current)
            current = current.parent
        chain.reverse()
        return chain


class ApiModel(ApiItem):
    """Root of an API hierarchy."""

    def __init__(self, display_name: str = "") -> None:
        super().__init__(display_name, ApiItemKind.MODEL)


class ApiPackage(ApiItem):
    def __init__(self, display_name: str) -> None:
        super().__init__(display_name, ApiItemKind.PACKAGE)


class ApiEntryPoint(ApiItem):
    def __init__(self, display_name: str = "") -> None:
        super().__init__(display_name, ApiItemKind.ENTRY_POINT)
