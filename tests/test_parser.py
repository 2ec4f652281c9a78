"""Tests for per-file extraction."""

import pytest
from jcodescan_mcp.parser import parse_file, unit_name


ORDER_SERVICE = '''
package com.acme.orders;

/**
 * Order operations.
 */
public abstract class OrderService extends BaseService implements Auditable {

    public enum State { NEW, PAID, SHIPPED }

    /** Places an order. */
    public Order place(Cart cart) {
        return null;
    }
}
'''


def test_parse_java():
    """Test one file produces a unit with its methods and enums."""
    result = parse_file(ORDER_SERVICE, "src/com/acme/orders/OrderService.java", "java")

    unit = result.unit
    assert unit.name == "OrderService"
    assert unit.package == "com.acme.orders"
    assert unit.qualified_name == "com.acme.orders.OrderService"
    assert unit.file == "src/com/acme/orders/OrderService.java"
    assert unit.superclass == "BaseService"
    assert unit.interfaces == ["Auditable"]
    assert unit.is_abstract is True
    assert unit.is_interface is False
    assert unit.is_rest_resource is False
    assert unit.subclasses == []

    assert [m.name for m in unit.methods] == ["place"]
    assert unit.methods[0].javadoc == "Places an order."

    assert result.enums == {"com.acme.orders.State": ["NEW", "PAID", "SHIPPED"]}
    assert result.endpoints == []


def test_unit_named_after_file():
    """Test the unit name comes from the file, not the declaration."""
    result = parse_file("public class Actual {\n}\n", "Declared.java")
    assert result.unit.name == "Declared"


def test_parse_is_repeatable():
    """Test parsing the same text twice gives equal results."""
    first = parse_file(ORDER_SERVICE, "OrderService.java")
    second = parse_file(ORDER_SERVICE, "OrderService.java")
    assert first == second


def test_unknown_language_returns_none():
    """Test unsupported languages are rejected."""
    assert parse_file("fn main() {}", "main.rs", "rust") is None


def test_empty_file():
    """Test an empty file yields an empty unit in the default package."""
    result = parse_file("", "Empty.java")

    assert result.unit.package == "default"
    assert result.unit.methods == []
    assert result.enums == {}


@pytest.mark.parametrize("filename,expected", [
    ("UserResource.java", "UserResource"),
    ("src/com/acme/UserResource.java", "UserResource"),
    ("/abs/path/A.java", "A"),
    ("NoExtension", "NoExtension"),
])
def test_unit_name(filename, expected):
    """Test unit name derivation from file paths."""
    assert unit_name(filename) == expected
