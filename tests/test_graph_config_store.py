import pytest

from flightgraph import GraphConfig
from flightgraph.config import Settings


def test_initial_state_defaults_to_empty():
    assert GraphConfig().get_graphs() == ()
    graphs = [{"label": "A", "height": 1, "fields": []}]
    assert GraphConfig(graphs).get_graphs() == tuple(graphs)


def test_set_graphs_replaces_and_notifies_once():
    store = GraphConfig()
    seen = []
    store.on("change", lambda: seen.append(store.get_graphs()))
    new = [{"label": "A", "height": 2, "fields": []}]
    store.set_graphs(new)
    # observer ran after the replacement was visible
    assert seen == [tuple(new)]
    assert store.get_graphs() == tuple(new)
    assert store.get_graphs()[0] is new[0]


def test_observers_run_in_registration_order_and_can_unsubscribe():
    store = GraphConfig()
    calls = []
    h1 = store.on("change", lambda: calls.append(1))
    store.on("change", lambda: calls.append(2))
    store.set_graphs([])
    assert calls == [1, 2]

    assert store.off(h1) is True
    assert store.off(h1) is False
    store.set_graphs([])
    assert calls == [1, 2, 2]


def test_observer_exception_propagates_after_replacement():
    store = GraphConfig()

    def boom():
        raise RuntimeError("observer failed")

    store.on("change", boom)
    new = [{"label": "x", "fields": []}]
    with pytest.raises(RuntimeError):
        store.set_graphs(new)
    assert store.get_graphs() == tuple(new)


def test_non_callable_rejected():
    with pytest.raises(TypeError):
        GraphConfig().on("change", "not callable")


def test_adapt_graphs_installs_result_with_single_notification(flight_log):
    store = GraphConfig()
    count = []
    store.on("change", lambda: count.append(1))
    resolved = store.adapt_graphs(flight_log, [{"label": "Motors", "fields": [{"name": "motor[all]"}]}])
    assert len(count) == 1
    assert store.get_graphs() == tuple(resolved)
    assert [f["name"] for f in resolved[0]["fields"]] == ["motor[0]", "motor[1]", "motor[2]", "motor[3]"]


def test_store_uses_settings_palette_and_height(flight_log):
    store = GraphConfig(settings=Settings(palette=["#000000", "#ffffff"], default_height=2))
    resolved = store.adapt_graphs(flight_log, [{"label": "M", "fields": [{"name": "motor[all]"}]}])
    assert resolved[0]["height"] == 2
    assert [f["color"] for f in resolved[0]["fields"]] == ["#000000", "#ffffff", "#000000", "#ffffff"]


def test_stored_sequence_is_read_only():
    new = [{"label": "A", "fields": []}]
    store = GraphConfig()
    store.set_graphs(new)
    graphs = store.get_graphs()
    with pytest.raises(AttributeError):
        graphs.append({"label": "B", "fields": []})
    # later edits to the caller's list do not reach the store
    new.append({"label": "C", "fields": []})
    assert len(store.get_graphs()) == 1
