from dotmap.ids import container_id, node_id, normalize


def test_node_id_lowercases_and_collapses_separators() -> None:
    assert node_id("Service A") == "r_service_a"
    assert node_id("  Billing -- API v2!") == "r__billing_api_v2_"


def test_node_id_prefix_keeps_leading_digits_legal() -> None:
    assert node_id("2fa") == "r_2fa"


def test_node_id_is_deterministic() -> None:
    assert node_id("Auth Service") == node_id("Auth Service")


def test_distinct_normalizations_give_distinct_ids() -> None:
    names = ["a", "b", "a b", "ab", "a1", "1a"]
    ids = {node_id(name) for name in names}
    assert len(ids) == len(names)


def test_names_with_same_normalization_collide() -> None:
    assert node_id("Service-A") == node_id("service a")


def test_node_id_of_none_is_degenerate() -> None:
    assert node_id(None) == "r_"
    assert normalize(None) == ""


def test_container_id_prefix_depends_on_style() -> None:
    assert container_id("Tier 1") == "cluster_tier_1"
    assert container_id("Tier 1", cluster=False) == "group_tier_1"


def test_non_string_names_are_stringified() -> None:
    assert node_id(5) == "r_5"
    assert container_id(2024) == "cluster_2024"
