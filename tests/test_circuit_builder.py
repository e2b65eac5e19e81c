# tests/test_circuit_builder.py
import pytest

from dcsim_core import (
    Circuit, CircuitBuilder, NetlistLoadError, load_into_circuit, load_netlist, save_circuit_text,
)
from dcsim_core.parser import parse_circuit_lines

DIVIDER_TEXT = """\
# simple divider
V V1 A GND 10
R R1 A B 10
R R2 B GND 10
"""

DIVIDER_YAML = """\
circuit_name: yaml_divider
solver:
  epsilon: 1.0e-12
components:
  - {type: V, name: V1, nodes: [A, GND], value: 10 V}
  - {type: R, name: R1, nodes: [A, B], value: 10 ohm}
  - {type: R, name: R2, nodes: [B, 0], value: 0.01 kohm}
"""


class TestLoadNetlist:

    def test_text_netlist(self, tmp_path):
        path = tmp_path / "divider.txt"
        path.write_text(DIVIDER_TEXT, encoding="utf-8")
        circuit = load_netlist(path)
        assert circuit.name == "divider"
        assert len(circuit.list_components()) == 3
        assert circuit.solve().ok
        assert circuit.voltage_of("B") == pytest.approx(5.0)

    def test_yaml_netlist(self, tmp_path):
        path = tmp_path / "divider.yaml"
        path.write_text(DIVIDER_YAML, encoding="utf-8")
        circuit = load_netlist(path)
        assert circuit.name == "yaml_divider"
        assert circuit.solver_config.epsilon == 1.0e-12
        assert circuit.list_components()[2].value == pytest.approx(10.0)
        assert circuit.solve().ok
        assert circuit.voltage_of("B") == pytest.approx(5.0)

    def test_missing_file(self, tmp_path):
        with pytest.raises(NetlistLoadError) as excinfo:
            load_netlist(tmp_path / "missing.txt")
        assert "File Access Error" in str(excinfo.value)

    def test_schema_error_is_wrapped(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("components: []\n", encoding="utf-8")
        with pytest.raises(NetlistLoadError) as excinfo:
            load_netlist(path)
        assert "YAML Schema Validation Error" in str(excinfo.value)

    def test_invalid_solver_block(self, tmp_path):
        path = tmp_path / "eps.yaml"
        path.write_text(
            "solver: {epsilon: 0}\ncomponents:\n  - {type: R, name: R1, nodes: [A, 0], value: 1}\n",
            encoding="utf-8",
        )
        with pytest.raises(NetlistLoadError) as excinfo:
            load_netlist(path)
        assert "Solver Configuration Error" in str(excinfo.value)


class TestPopulate:

    def test_rejected_component_aborts_and_clears(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("R R1 A 0 10\nR R2 A B 0\nR R3 B 0 10\n", encoding="utf-8")
        circuit = Circuit()
        with pytest.raises(NetlistLoadError) as excinfo:
            load_into_circuit(circuit, path)
        report = str(excinfo.value)
        assert "Resistor 'R2' rejected" in report
        assert "Line:           2" in report
        assert circuit.is_empty()
        assert circuit.list_nodes() == {"0": 0, "GND": 0, "gnd": 0}

    def test_self_loop_is_rejected(self):
        parsed = parse_circuit_lines(["V V1 A A 5"])
        with pytest.raises(NetlistLoadError, match="rejected"):
            CircuitBuilder().build_circuit(parsed)

    def test_load_replaces_previous_contents(self, voltage_divider, tmp_path):
        path = tmp_path / "single.txt"
        path.write_text("I I1 0 X 1\nR R1 X 0 2\n", encoding="utf-8")
        voltage_divider.solve()
        assert load_into_circuit(voltage_divider, path) == 2
        assert [comp.name for comp in voltage_divider.list_components()] == ["I1", "R1"]
        assert voltage_divider.resolve_node("X") == 1
        assert voltage_divider.solution is None
        assert voltage_divider.solve().ok
        assert voltage_divider.voltage_of("X") == pytest.approx(2.0)

    def test_skipped_lines_do_not_abort(self, tmp_path):
        path = tmp_path / "noisy.txt"
        path.write_text("R R1 A 0 10\nQ Q1 A B 1\ngarbage\n", encoding="utf-8")
        circuit = load_netlist(path)
        assert [comp.name for comp in circuit.list_components()] == ["R1"]


class TestSaveAndReload:

    def test_round_trip_preserves_solution(self, make_circuit, tmp_path):
        original = make_circuit([
            ("V", "V1", "in", "GND", 12.0),
            ("R", "R1", "in", "mid", 4700.0),
            ("R", "R2", "mid", "0", 3300.0),
            ("I", "I1", "gnd", "mid", 0.001),
        ])
        path = tmp_path / "saved.txt"
        save_circuit_text(original, path)
        reloaded = load_netlist(path)

        assert [str(c) for c in reloaded.list_components()] == [str(c) for c in original.list_components()]
        assert original.solve().ok and reloaded.solve().ok
        assert reloaded.voltage_of("mid") == pytest.approx(original.voltage_of("mid"))
