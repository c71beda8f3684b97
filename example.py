"""Example usage of the deepmatch comparison engine."""

import json
from deepmatch import MatchEngine, ConfigNode, ConfigurationError, MatchingStatus

# Expected invoice, as recorded by the reference system
expected_invoice = {
    "id": "INV-001",
    "total": 100.00,
    "status": "paid",
    "updatedAt": "2025-02-02T11:00:00Z",  # Will be ignored
    "lineItems": [
        {"sku": "WIDGET-001", "quantity": 5, "unitPrice": 10.00},
        {"sku": "GADGET-002", "quantity": 2, "unitPrice": 25.50},
        {"sku": "GIZMO-003", "quantity": 1, "unitPrice": 99.00},
    ]
}

# Actual invoice, as returned by the system under test
actual_invoice = {
    "id": "INV-001",
    "total": 100.00,
    "status": "paid",
    "updatedAt": "2025-02-03T09:12:44Z",
    "lineItems": [
        {"sku": "GADGET-002", "quantity": 3, "unitPrice": 25.50},  # Reordered, quantity changed
        {"sku": "WIDGET-001", "quantity": 5, "unitPrice": 10.00},
    ]
}

ignored = {"updatedAt": True}
business_key = {"lineItems": {"sku": True}}


def print_tree(result, indent=0):
    pad = "  " * indent
    for path, node in result.walk():
        if node.status in (MatchingStatus.PASS, MatchingStatus.IGNORED):
            continue
        print(f"{pad}{path}: {node.status.value}")


def main():
    print("=" * 60)
    print("deepmatch Comparison Engine - Example")
    print("=" * 60)

    engine = MatchEngine()
    result = engine.compare(expected_invoice, actual_invoice, ignored, business_key)

    print(f"\nMatch: {result.is_match}")
    print(f"Status: {result.status.value}")

    line_items = result["lineItems"]
    for index in range(len(expected_invoice["lineItems"])):
        row = line_items[index]
        print(f"  lineItems[{index}] -> {row.status.value} (actual index: {row.match_index})")

    print("\nNon-passing nodes:")
    print_tree(result, 1)

    print("\n" + "-" * 60)
    print("Full JSON Report:")
    print(json.dumps(result.to_dict(), indent=2))


def example_with_paths():
    """Example building the configuration from JSONPath expressions."""
    print("\n" + "=" * 60)
    print("Example with JSONPath configuration")
    print("=" * 60)

    ignored_tree = ConfigNode.from_paths(["$.updatedAt", "$.lineItems[*].unitPrice"])
    key_tree = ConfigNode.from_paths(["$.lineItems[*].sku"])
    print(f"\nIgnored: {ignored_tree.to_dict()}")
    print(f"Business key: {key_tree.to_dict()}")

    result = MatchEngine().compare(expected_invoice, actual_invoice, ignored_tree, key_tree)
    print(f"Status: {result.status.value}")


def example_with_conflict():
    """Example that demonstrates a configuration conflict."""
    print("\n" + "=" * 60)
    print("Example with conflicting configuration")
    print("=" * 60)

    try:
        MatchEngine().compare(
            expected_invoice,
            actual_invoice,
            {"lineItems": {"sku": True}},
            business_key,
        )
    except ConfigurationError as e:
        print(f"\nError: {e.message}")
        print(f"Path: {e.path}")


if __name__ == "__main__":
    main()
    example_with_paths()
    example_with_conflict()
