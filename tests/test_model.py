import pytest

from graph_store import InvalidArgument, Node
from graph_store.model.edge import DEFAULT_WEIGHT


def test_node_exposes_id_and_content(store):
    node = store.add_node({"name": "Alice"}, 1).unwrap()

    assert isinstance(node, Node)
    assert node.id == 1
    assert node.key == "1"
    assert node.content == {"name": "Alice"}
    with pytest.raises(AttributeError):
        node.content = "other"


def test_node_content_stays_mutable_by_reference(store):
    content = {"tags": []}
    store.add_node(content, "a")

    store.get_node("a").content["tags"].append("x")

    assert content == {"tags": ["x"]}


def test_edge_holds_resolved_endpoints(people):
    edge = people.get_edge("friend")

    assert edge.start_node is people.get_node("1")
    assert edge.end_node is people.get_node("2")
    assert edge.start_id == "1"
    assert edge.end_id == "2"
    assert edge.weight == 1.5


def test_edge_default_weight(store):
    store.add_node("a", "a")
    store.add_node("b", "b")

    edge = store.add_edge("a", "b", "ab").unwrap()

    assert edge.weight == DEFAULT_WEIGHT == 1


def test_set_weight(people):
    edge = people.get_edge("friend")

    edge.set_weight(4)
    assert people.get_edge("friend").weight == 4

    edge.weight = 0.25
    assert edge.weight == 0.25


@pytest.mark.parametrize("weight", ["heavy", None, True])
def test_set_weight_rejects_non_numbers(people, weight):
    edge = people.get_edge("friend")

    with pytest.raises(InvalidArgument):
        edge.set_weight(weight)

    assert edge.weight == 1.5


def test_id_is_read_only(people):
    with pytest.raises(AttributeError):
        people.get_edge("friend").id = "other"
