from __future__ import annotations

from orgchart.models.hierarchy import HierarchyNode
from orgchart.services.hierarchy_builder import build_hierarchy
from orgchart.services.node_counter import count_nodes


def test_count_none_is_zero():
    assert count_nodes(None) == 0


def test_count_single_node():
    assert count_nodes(HierarchyNode(id="solo")) == 1


def test_count_scenario_tree(scenario_records):
    tree = build_hierarchy(scenario_records, "1")
    assert count_nodes(tree) == 4


def test_count_is_one_plus_children(search_records):
    tree = build_hierarchy(search_records, "root")

    assert count_nodes(tree) == 1 + sum(count_nodes(child) for child in tree.children)
    assert count_nodes(tree) == len(search_records)


def test_count_subtree(scenario_records):
    assert count_nodes(build_hierarchy(scenario_records, "2")) == 2
    assert count_nodes(build_hierarchy(scenario_records, "3")) == 1


def test_count_deep_chain(record_factory):
    records = [record_factory("0")]
    records += [record_factory(str(i), manager_id=str(i - 1)) for i in range(1, 5000)]

    assert count_nodes(build_hierarchy(records, "0")) == 5000
