# tests/test_topology_analyzer.py
import networkx as nx

from dcsim_core import ComponentKind, TopologyAnalyzer


def _analyzer(circuit):
    return TopologyAnalyzer(circuit.node_registry, circuit.list_components())


class TestGraphConstruction:

    def test_every_component_is_an_edge(self, voltage_divider):
        graph = _analyzer(voltage_divider).graph
        assert isinstance(graph, nx.MultiGraph)
        assert set(graph.nodes) == {0, 1, 2}
        assert graph.number_of_edges() == 3
        kinds = sorted(data["kind"].type_code for _, _, data in graph.edges(data=True))
        assert kinds == ["R", "R", "V"]

    def test_parallel_components_are_kept(self, make_circuit):
        circuit = make_circuit([
            ("R", "R1", "A", "GND", 10.0),
            ("R", "R2", "A", "GND", 20.0),
        ])
        graph = _analyzer(circuit).graph
        assert graph.number_of_edges(1, 0) == 2
        assert {data["name"] for _, _, data in graph.edges(data=True)} == {"R1", "R2"}

    def test_conduction_graph_excludes_current_sources(self, current_injection):
        analyzer = _analyzer(current_injection)
        assert analyzer.graph.number_of_edges() == 2
        assert analyzer.conduction_graph.number_of_edges() == 1
        (_, _, data), = analyzer.conduction_graph.edges(data=True)
        assert data["kind"] is ComponentKind.RESISTOR


class TestConnectivityQueries:

    def test_fully_grounded_circuit(self, voltage_divider):
        analyzer = _analyzer(voltage_divider)
        assert analyzer.is_grounded()
        assert analyzer.grounded_nodes() == {0, 1, 2}
        assert analyzer.floating_nodes() == []
        assert analyzer.isolated_nodes() == []

    def test_no_ground_reference(self, make_circuit):
        circuit = make_circuit([("R", "R1", "N10", "N2", 1.0)])
        analyzer = _analyzer(circuit)
        assert not analyzer.is_grounded()
        assert analyzer.floating_nodes() == ["N2", "N10"]

    def test_node_reached_only_by_current_source_is_floating(self, make_circuit):
        circuit = make_circuit([
            ("R", "R1", "A", "GND", 1.0),
            ("I", "I1", "A", "B", 1.0),
        ])
        analyzer = _analyzer(circuit)
        assert analyzer.is_grounded()
        assert analyzer.floating_nodes() == ["B"]
        assert analyzer.isolated_nodes() == []

    def test_isolated_node(self, make_circuit):
        circuit = make_circuit([("R", "R1", "A", "GND", 1.0)])
        circuit.resolve_node("orphan")
        analyzer = _analyzer(circuit)
        assert analyzer.isolated_nodes() == ["orphan"]
        assert analyzer.floating_nodes() == ["orphan"]

    def test_connected_groups(self, make_circuit):
        circuit = make_circuit([
            ("R", "R1", "A", "GND", 1.0),
            ("R", "R2", "X", "Y", 1.0),
        ])
        groups = _analyzer(circuit).connected_groups()
        assert groups == [["A", "GND"], ["X", "Y"]]
