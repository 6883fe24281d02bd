"""Tests for the API hierarchy model."""

from __future__ import annotations

import pytest

from api_docs_tools.model import ApiEntryPoint, ApiItem, ApiItemKind, ApiModel, ApiPackage


def test_get_hierarchy_orders_root_first() -> None:
    model = ApiModel()
    package = model.add_member(ApiPackage("pkg"))
    entry = package.add_member(ApiEntryPoint())
    cls = entry.add_member(ApiItem("Foo", ApiItemKind.CLASS))
    method = cls.add_member(ApiItem("bar", ApiItemKind.METHOD))

    assert method.get_hierarchy() == [model, package, entry, cls, method]
    assert model.get_hierarchy() == [model]


def test_add_member_rejects_attached_item() -> None:
    first = ApiPackage("a")
    second = ApiPackage("b")
    item = first.add_member(ApiItem("Foo", ApiItemKind.CLASS))

    with pytest.raises(ValueError, match="already belongs to 'a'"):
        second.add_member(item)


def test_find_members_by_name() -> None:
    package = ApiPackage("pkg")
    fn = package.add_member(ApiItem("parse", ApiItemKind.FUNCTION))
    ns = package.add_member(ApiItem("parse", ApiItemKind.NAMESPACE))
    package.add_member(ApiItem("Other", ApiItemKind.CLASS))

    assert package.find_members_by_name("parse") == [fn, ns]
    assert package.find_members_by_name("missing") == []


def test_boundary_kinds() -> None:
    assert ApiModel().kind is ApiItemKind.MODEL
    assert ApiPackage("p").kind is ApiItemKind.PACKAGE
    assert ApiEntryPoint().kind is ApiItemKind.ENTRY_POINT
    assert ApiItemKind.TYPE_ALIAS.value.lower() == "typealias"
