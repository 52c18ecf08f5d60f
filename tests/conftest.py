import pytest

from graph_store import GraphStore


@pytest.fixture
def store():
    return GraphStore()


@pytest.fixture
def people(store):
    """Two people and a company, linked by three weighted edges."""
    store.add_node({"name": "Alice", "type": "person"}, "1")
    store.add_node({"name": "Bob", "type": "person"}, "2")
    store.add_node({"name": "CompanyX", "type": "company"}, "3")

    store.add_edge("1", "2", "friend", weight=1.5)
    store.add_edge("2", "3", "employee", weight=2.0)
    store.add_edge("1", "3", "investor", weight=5.0)
    return store
