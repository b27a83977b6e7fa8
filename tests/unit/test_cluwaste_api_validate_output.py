"""Unit tests for output validation and the schema registry."""

import pytest

from cluwaste.api._output_schemas import BaseOutputSchema, get_output_schema, output_schema
from cluwaste.api._output_schemas.config import ConfigShowOutput
from cluwaste.api._output_schemas.scan import ScanRunOutput
from cluwaste.api.config.cmd_show import cmd_show
from cluwaste.api.validate_output import validate_output


def _show_output(**overrides):
    output = {"section": "scan", "content": {"max_workers": None}, "config_path": "/tmp/config.json"}
    output.update(overrides)
    return output


def test_commands_resolve_to_their_models():
    assert get_output_schema("scan", "scan") is ScanRunOutput
    assert get_output_schema("config", "show") is ConfigShowOutput
    assert get_output_schema("scan", "nothing") is None


def test_defaults_are_filled_in():
    assert validate_output(cmd_show, _show_output()) == {**_show_output(), "errors": [], "warnings": []}


def test_missing_field_is_rejected():
    output = _show_output()
    del output["config_path"]

    with pytest.raises(ValueError, match="config.show output does not match ConfigShowOutput"):
        validate_output(cmd_show, output)


def test_undeclared_key_is_rejected():
    with pytest.raises(ValueError, match="ConfigShowOutput"):
        validate_output(cmd_show, _show_output(stray=1))


def test_functions_outside_the_api_pass_through():
    def cmd_local():
        return None

    assert validate_output(cmd_local, {"anything": 1}) == {"anything": 1}


def test_second_registration_is_refused():
    with pytest.raises(ValueError, match="already registered for scan.scan"):

        @output_schema("scan", "scan")
        class Duplicate(BaseOutputSchema):
            pass
