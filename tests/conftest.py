# tests/conftest.py
import pytest

from dcsim_core import Circuit, ComponentKind


def _create_circuit(components_def, name="TestCircuit", solver_config=None):
    """
    Programmatically creates a Circuit from compact definitions.
    components_def: e.g. [("V", "V1", "A", "GND", 10.0), ("R", "R1", "A", "GND", 5.0)]
    """
    circuit = Circuit(name=name, solver_config=solver_config)
    for type_code, comp_name, node_a, node_b, value in components_def:
        circuit.add(ComponentKind.from_type_code(type_code), comp_name, node_a, node_b, value)
    return circuit


@pytest.fixture
def make_circuit():
    return _create_circuit


@pytest.fixture
def empty_circuit():
    return Circuit(name="Empty")


@pytest.fixture
def voltage_divider():
    """
    V1 (10 V) drives A; R1 (10 ohm) from A to B; R2 (10 ohm) from B to ground.
    Expected: V(A) = 10 V, V(B) = 5 V, 0.5 A delivered by V1.
    """
    return _create_circuit([
        ("V", "V1", "A", "GND", 10.0),
        ("R", "R1", "A", "B", 10.0),
        ("R", "R2", "B", "GND", 10.0),
    ], name="VoltageDivider")


@pytest.fixture
def current_injection():
    """I1 injects 2 A from ground into A; R1 (5 ohm) returns it. Expected: V(A) = 10 V."""
    return _create_circuit([
        ("I", "I1", "GND", "A", 2.0),
        ("R", "R1", "A", "GND", 5.0),
    ], name="CurrentInjection")
