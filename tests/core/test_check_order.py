import copy

from ordercheck.core import OrderItem, check_order
from tests.helpers._catalog_builders import (
    dependency,
    lines,
    number_constraint,
    product,
    sample_categories,
    sample_products,
)


def _check(*pairs):
    return check_order(lines(*pairs), sample_products(), sample_categories())


# ---------------------------------------------------------------------------
# Valid configurations
# ---------------------------------------------------------------------------


def test_accepts_platform_with_clamps_and_controller() -> None:
    result = _check(("platform-modern-200", 1), ("clamp-auto-10", 4), ("controller-pro-8", 1))

    assert result.valid is True
    assert result.errors == []


def test_accepts_compact_platform_with_minimum_requirements() -> None:
    result = _check(("platform-compact-120", 1), ("clamp-manual-5", 2), ("controller-basic-4", 1))

    assert result.valid is True
    assert result.errors == []


def test_accepts_more_clamps_than_required() -> None:
    result = _check(("platform-modern-200", 1), ("clamp-auto-10", 6), ("controller-pro-8", 1))

    assert result.valid is True


def test_accepts_products_without_dependencies() -> None:
    result = _check(("clamp-manual-5", 10), ("controller-basic-4", 2))

    assert result.valid is True
    assert result.errors == []


def test_accepts_automatic_clamps_with_supporting_controller() -> None:
    result = _check(("clamp-auto-10", 2), ("controller-pro-8", 1))

    assert result.valid is True


def test_accepts_order_item_instances() -> None:
    order = [
        OrderItem(product_id="clamp-auto-10", quantity=2),
        OrderItem(product_id="controller-pro-8", quantity=1),
    ]

    result = check_order(order, sample_products(), sample_categories())

    assert result.valid is True


def test_empty_order_is_valid() -> None:
    result = check_order([], sample_products(), sample_categories())

    assert result.valid is True
    assert result.errors == []


def test_multiple_products_with_dependencies() -> None:
    result = _check(
        ("platform-modern-200", 2),
        ("platform-compact-120", 1),
        ("clamp-auto-10", 10),
        ("controller-pro-8", 2),
    )

    assert result.valid is True
    assert result.errors == []


# ---------------------------------------------------------------------------
# Missing dependencies
# ---------------------------------------------------------------------------


def test_rejects_platform_without_clamps() -> None:
    result = _check(("platform-modern-200", 1), ("controller-pro-8", 1))

    assert result.valid is False
    assert len(result.errors) == 1
    assert result.errors[0].product_id == "platform-modern-200"
    assert "clamp" in result.errors[0].message


def test_rejects_platform_without_controller() -> None:
    result = _check(("platform-modern-200", 1), ("clamp-auto-10", 4))

    assert result.valid is False
    platform_errors = result.errors_for("platform-modern-200")
    assert len(platform_errors) == 1
    assert "controller" in platform_errors[0].message
    # The automatic clamps also need a controller.
    assert len(result.errors_for("clamp-auto-10")) == 1


def test_rejects_insufficient_clamp_quantity() -> None:
    result = _check(("platform-modern-200", 1), ("clamp-auto-10", 2), ("controller-pro-8", 1))

    assert result.valid is False
    assert len(result.errors) == 1
    assert result.errors[0].product_id == "platform-modern-200"
    assert "at least 4" in result.errors[0].message


def test_unmet_dependency_message_format() -> None:
    result = _check(("platform-modern-200", 1), ("clamp-auto-10", 2), ("controller-pro-8", 1))

    assert result.errors[0].message == (
        'Product "Modern Platform 200" (quantity: 1) has unmet dependency: '
        'Requires at least 4 product(s) from category "clamp" with specific constraints, '
        "but only 2 found"
    )


def test_rejects_automatic_clamps_without_supporting_controller() -> None:
    result = _check(("clamp-auto-10", 2), ("controller-basic-4", 1))

    assert result.valid is False
    assert len(result.errors) == 1
    assert result.errors[0].product_id == "clamp-auto-10"
    assert "specific constraints" in result.errors[0].message


def test_rejects_automatic_clamps_without_any_controller() -> None:
    result = _check(("clamp-auto-10", 2))

    assert result.valid is False
    assert len(result.errors) == 1
    assert result.errors[0].product_id == "clamp-auto-10"
    assert "but only 0 found" in result.errors[0].message


def test_accumulates_every_unmet_dependency() -> None:
    result = _check(("platform-modern-200", 1), ("clamp-auto-10", 2))

    assert result.valid is False
    assert [error.product_id for error in result.errors] == [
        "platform-modern-200",
        "platform-modern-200",
        "clamp-auto-10",
    ]


# ---------------------------------------------------------------------------
# Property constraints
# ---------------------------------------------------------------------------


def test_rejects_clamps_that_are_too_small() -> None:
    result = _check(("platform-modern-200", 1), ("clamp-manual-5", 4), ("controller-pro-8", 1))

    assert result.valid is False
    assert len(result.errors) == 1
    assert result.errors[0].product_id == "platform-modern-200"
    assert "specific constraints" in result.errors[0].message


def test_compact_platform_accepts_basic_controller_but_clamps_do_not() -> None:
    result = _check(("platform-compact-120", 1), ("clamp-auto-10", 2), ("controller-basic-4", 1))

    assert result.valid is False
    assert len(result.errors) == 1
    assert result.errors[0].product_id == "clamp-auto-10"


def test_unconstrained_dependency_message_has_no_constraint_suffix() -> None:
    result = _check(("platform-compact-120", 1), ("clamp-manual-5", 2))

    assert len(result.errors) == 1
    assert result.errors[0].message.endswith(
        'Requires at least 1 product(s) from category "controller", but only 0 found'
    )


# ---------------------------------------------------------------------------
# Resolution phase
# ---------------------------------------------------------------------------


def test_rejects_unknown_product() -> None:
    result = _check(("non-existent-product", 1))

    assert result.valid is False
    assert len(result.errors) == 1
    assert result.errors[0].product_id == "non-existent-product"
    assert result.errors[0].message == 'Product "non-existent-product" not found'


def test_every_unknown_product_gets_one_error() -> None:
    result = _check(("ghost-a", 1), ("ghost-b", 0), ("ghost-c", -3))

    assert result.valid is False
    assert [error.product_id for error in result.errors] == ["ghost-a", "ghost-b", "ghost-c"]
    assert all("not found" in error.message for error in result.errors)


def test_rejects_zero_quantity() -> None:
    result = _check(("clamp-manual-5", 0))

    assert result.valid is False
    assert len(result.errors) == 1
    assert result.errors[0].product_id == "clamp-manual-5"
    assert "greater than 0" in result.errors[0].message


def test_rejects_negative_quantity() -> None:
    result = _check(("controller-basic-4", -5))

    assert result.valid is False
    assert len(result.errors) == 1
    assert result.errors[0].product_id == "controller-basic-4"
    assert "greater than 0" in result.errors[0].message


def test_rejects_non_integer_quantities() -> None:
    result = _check(("clamp-manual-5", 1.5), ("controller-basic-4", True), ("controller-pro-8", "2"))

    assert [error.message for error in result.errors] == ["Quantity must be greater than 0"] * 3


def test_resolution_errors_skip_dependency_checks() -> None:
    # The platform alone would fail both dependencies; only the quantity error is reported.
    result = _check(("platform-modern-200", 1), ("clamp-manual-5", 0))

    assert result.valid is False
    assert len(result.errors) == 1
    assert result.errors[0].product_id == "clamp-manual-5"
    assert all("unmet dependency" not in error.message for error in result.errors)


def test_malformed_order_lines_are_reported_not_raised() -> None:
    result = check_order([{}, {"productId": "clamp-manual-5"}], sample_products(), sample_categories())

    assert result.valid is False
    assert [error.message for error in result.errors] == [
        'Product "" not found',
        "Quantity must be greater than 0",
    ]


# ---------------------------------------------------------------------------
# Aggregation and purity
# ---------------------------------------------------------------------------


def _rig_catalog():
    rig = product(
        "rig",
        "frame",
        name="Rig",
        dependencies=(dependency("leg", 4),),
    )
    long_rig = product(
        "long-rig",
        "frame",
        name="Long Rig",
        dependencies=(dependency("leg", 4, number_constraint("heightCm", min=100)),),
    )
    return [
        rig,
        long_rig,
        product("leg-short", "leg", heightCm=60),
        product("leg-tall", "leg", heightCm=120),
        product("leg-taller", "leg", heightCm=150),
    ]


def test_quantities_pool_across_matching_products() -> None:
    catalog = _rig_catalog()
    for split in ((4, 0, 0), (1, 1, 2), (2, 2, 0), (0, 3, 1)):
        order = lines(("rig", 1), *[(pid, qty) for pid, qty in zip(("leg-short", "leg-tall", "leg-taller"), split) if qty])

        assert check_order(order, catalog).valid is True


def test_constraint_filters_candidates_before_pooling() -> None:
    catalog = _rig_catalog()

    result = check_order(lines(("long-rig", 1), ("leg-short", 3), ("leg-tall", 1)), catalog)

    assert result.valid is False
    assert "but only 1 found" in result.errors[0].message
    # The same legs satisfy the unconstrained rig.
    assert check_order(lines(("rig", 1), ("leg-short", 3), ("leg-tall", 1)), catalog).valid is True


def test_product_counts_toward_its_own_dependency() -> None:
    chain = product("link", "link", dependencies=(dependency("link", 3),))

    assert check_order(lines(("link", 3)), [chain]).valid is True
    assert check_order(lines(("link", 2)), [chain]).valid is False


def test_repeated_order_lines_keep_the_last_quantity() -> None:
    result = _check(("clamp-auto-10", 4), ("platform-modern-200", 1), ("controller-pro-8", 1), ("clamp-auto-10", 2))

    assert result.valid is False
    assert "but only 2 found" in result.errors[0].message


def test_check_order_is_idempotent_and_does_not_mutate_inputs() -> None:
    products = sample_products()
    order = lines(("platform-modern-200", 1), ("clamp-auto-10", 2))
    snapshot = copy.deepcopy(order)
    properties_before = [dict(p.properties) for p in products]

    first = check_order(order, products, sample_categories())
    second = check_order(order, products, sample_categories())

    assert first == second
    assert order == snapshot
    assert [dict(p.properties) for p in products] == properties_before


def test_result_serializes_to_wire_shape() -> None:
    result = _check(("ghost", 1))

    assert result.to_dict() == {
        "valid": False,
        "errors": [{"productId": "ghost", "message": 'Product "ghost" not found'}],
    }
