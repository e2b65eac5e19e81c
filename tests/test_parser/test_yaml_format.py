# tests/test_parser/test_yaml_format.py
import textwrap

import pytest

from dcsim_core import ComponentKind, FileIOError, NetlistParser, ParsingError, SchemaValidationError


@pytest.fixture
def parser():
    return NetlistParser()


@pytest.fixture
def write_yaml(tmp_path):
    def _write(content, name="netlist.yaml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path
    return _write


class TestValidNetlists:

    def test_voltage_divider(self, parser, write_yaml):
        path = write_yaml("""
            circuit_name: divider
            components:
              - {type: V, name: V1, nodes: [A, GND], value: 10 V}
              - {type: R, name: R1, nodes: [A, B], value: 10 ohm}
              - {type: R, name: R2, nodes: [B, 0], value: 10}
        """)
        parsed = parser.parse(path)
        assert parsed.circuit_name == "divider"
        assert parsed.source_path == path
        assert [r.kind for r in parsed.components] == [
            ComponentKind.VOLTAGE_SOURCE, ComponentKind.RESISTOR, ComponentKind.RESISTOR,
        ]
        assert parsed.components[0].raw_value == "10 V"
        assert parsed.components[2].raw_value == 10
        assert parsed.raw_solver_config == {}

    def test_integer_ground_node_becomes_string(self, parser):
        parsed = parser.parse_mapping({"components": [{"type": "R", "name": "R1", "nodes": ["A", 0], "value": 1}]})
        assert parsed.components[0].node_b == "0"

    def test_lowercase_type_code(self, parser):
        parsed = parser.parse_mapping({"components": [{"type": "i", "name": "I1", "nodes": ["0", "A"], "value": "2 mA"}]})
        assert parsed.components[0].kind is ComponentKind.CURRENT_SOURCE

    def test_solver_block_and_default_name(self, parser, write_yaml):
        path = write_yaml("""
            solver:
              epsilon: 1.0e-12
            components:
              - {type: R, name: R1, nodes: [A, GND], value: 1}
        """, name="tiny.yaml")
        parsed = parser.parse(path)
        assert parsed.raw_solver_config == {"epsilon": 1.0e-12}
        assert parsed.circuit_name == "tiny"


class TestSchemaErrors:

    @pytest.mark.parametrize("content, field", [
        ({"circuit_name": "x"}, "components"),
        ({"components": []}, "components"),
        ({"components": [{"type": "X", "name": "Q1", "nodes": ["A", "B"], "value": 1}]}, "components"),
        ({"components": [{"type": "R", "name": "R1", "nodes": ["A"], "value": 1}]}, "components"),
        ({"components": [{"type": "R", "name": "R1", "nodes": ["A", "B"]}]}, "components"),
        ({"components": [{"type": "R", "name": "R1", "nodes": ["A", "B"], "value": 1}], "extra": 1}, "extra"),
    ])
    def test_invalid_structure(self, parser, content, field):
        with pytest.raises(SchemaValidationError) as excinfo:
            parser.parse_mapping(content)
        assert field in excinfo.value.errors

    def test_self_loop_is_rejected(self, parser):
        with pytest.raises(SchemaValidationError) as excinfo:
            parser.parse_mapping({"components": [{"type": "R", "name": "R1", "nodes": ["A", "A"], "value": 1}]})
        assert "connect a node to itself" in str(excinfo.value)

    def test_report_lists_fields(self, parser):
        with pytest.raises(SchemaValidationError) as excinfo:
            parser.parse_mapping({"circuit_name": "x"}, source_path="bad.yaml")
        report = excinfo.value.get_diagnostic_report()
        assert "YAML Schema Validation Error" in report
        assert "Field 'components'" in report
        assert "bad.yaml" in report


class TestFileErrors:

    def test_missing_file(self, parser, tmp_path):
        with pytest.raises(FileIOError):
            parser.parse(tmp_path / "absent.yaml")

    def test_empty_file(self, parser, write_yaml):
        with pytest.raises(ParsingError, match="empty"):
            parser.parse(write_yaml(""))

    def test_invalid_yaml(self, parser, write_yaml):
        with pytest.raises(ParsingError, match="Invalid YAML syntax"):
            parser.parse(write_yaml("components: [unclosed\n"))

    def test_root_must_be_mapping(self, parser, write_yaml):
        with pytest.raises(ParsingError, match="dictionary"):
            parser.parse(write_yaml("- just\n- a list\n"))
