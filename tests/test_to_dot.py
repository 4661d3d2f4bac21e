from dotmap import Registry, generate_dot, raw

HREF_A = "javascript:(function(){document.getElementById('g').setAttribute('class', 'graph r_service_a')})()"


def test_empty_registry_has_only_preamble_and_defaults() -> None:
    assert generate_dot(Registry()) == (
        "digraph G {\n"
        '  id="g";\n'
        '  rankdir="LR";\n'
        '  node [ shape="box3d"; ];\n'
        '  edge [ fontsize=7; color="black"; ];\n'
        "\n"
        "\n"
        "}\n"
    )


def test_service_scenario(service_registry: Registry) -> None:
    dot = generate_dot(service_registry)

    assert dot.count("subgraph ") == 1
    assert "  subgraph cluster_tier_1 {\n" in dot
    assert '    label="Tier 1";\n' in dot
    assert '    color="blue";\n' in dot
    assert '    node [ shape="rectangle"; ];\n' in dot
    assert '    edge [ color="black"; ];\n' in dot
    assert '    r_service_b [ label="Service B"; id="r_service_b"; group="Tier 1"; href=' in dot
    assert 'r_service_a [ label="Service A"; id="r_service_a"; group=' not in dot
    assert f'  r_service_a [ label="Service A"; id="r_service_a"; href="{HREF_A}"; ];\n' in dot
    assert (
        '  r_service_a -> r_service_b [ label="calls"; '
        'edgetooltip="Service A -&gt; Service B"; id="f_r_service_a t_r_service_b"; ];\n'
    ) in dot
    assert dot.endswith("}\n")


def test_sections_are_ordered(service_registry: Registry) -> None:
    dot = generate_dot(service_registry)
    assert dot.index("subgraph") < dot.index("  r_service_a [") < dot.index("->")


def test_compilation_does_not_mutate_registry(service_registry: Registry) -> None:
    first = generate_dot(service_registry)
    second = generate_dot(service_registry)

    assert first == second
    edge = service_registry.edges[0]
    assert edge.attributes == {"label": "calls"}
    assert "href" not in service_registry.get("r_service_a").attributes


def test_title_and_graph_settings() -> None:
    registry = Registry({"name": "Services", "rankdir": "TB", "graph": {"fontname": "Helvetica"}})
    dot = generate_dot(registry)
    assert '  rankdir="TB";\n  label="Services";\n  fontname="Helvetica";\n' in dot


def test_empty_default_mappings_are_suppressed() -> None:
    registry = Registry({"node": {}, "edge": None, "groupNode": {}, "groupEdge": {}})
    registry.node("A", group="G")
    dot = generate_dot(registry)
    assert "node [" not in dot
    assert "edge [" not in dot


def test_caller_group_label_wins_over_group_name() -> None:
    registry = Registry({"group": {"label": "Shared", "style": "dashed"}})
    registry.node("A", group="G")
    dot = generate_dot(registry)
    assert '    label="Shared";\n    style="dashed";\n' in dot
    assert 'label="G"' not in dot


def test_plain_grouping_uses_group_prefix() -> None:
    registry = Registry({"cluster": False})
    registry.node("A", group="Back End")
    assert "  subgraph group_back_end {\n" in generate_dot(registry)


def test_raw_fragments_and_same_rank() -> None:
    registry = Registry(
        {
            "raw": "  r_a -> r_b [ style=invis ];",
            "groupRaw": {"G": "    r_a;"},
            "sameRank": ["A", "Ghost", "Service B"],
        }
    )
    registry.node("A", group="G")
    registry.node("Service B")
    dot = generate_dot(registry)

    assert "    r_a;\n  }\n" in dot
    assert "  r_a -> r_b [ style=invis ];\n  { rank=same; r_a; r_service_b; }\n}\n" in dot
    assert "r_ghost" not in dot


def test_same_rank_skips_pruned_nodes() -> None:
    registry = Registry({"sameRank": ["A", "Lonely"]})
    registry.node("Lonely")
    registry.edge("A", "B")
    registry.generate_missing_nodes()
    registry.prune_unconnected_nodes()

    dot = generate_dot(registry)

    assert "  { rank=same; r_a; }\n" in dot
    assert "r_lonely" not in dot


def test_same_rank_block_is_omitted_without_registered_members() -> None:
    registry = Registry({"sameRank": ["Nobody"]})
    assert "rank=same" not in generate_dot(registry)


def test_raw_markup_labels_are_not_quoted() -> None:
    registry = Registry()
    registry.node("A", {"label": raw("<<b>A</b>>")})
    registry.node("B", {"label": "<<i>B</i>>"})
    dot = generate_dot(registry)
    assert "label=<<b>A</b>>;" in dot
    assert "label=<<i>B</i>>;" in dot


def test_parallel_edges_render_separately() -> None:
    registry = Registry()
    registry.edge("A", "B")
    registry.edge("A", "B")
    assert generate_dot(registry).count("  r_a -> r_b [") == 2
