"""
Unit Tests for the Command-Line Interface
=========================================
"""

import io
import json

import pytest

from eosvalidate.cli import EXIT_INVALID, EXIT_OK, EXIT_USAGE, main
from eosvalidate.core.logging.logger import shutdown_logging


@pytest.fixture
def run_cli():
    def _run(*argv):
        out = io.StringIO()
        code = main(list(argv), out=out)
        return code, out.getvalue()

    yield _run
    shutdown_logging()


@pytest.mark.unit
class TestCli:
    """Test eosvalidate.cli.main."""

    def test_valid_value(self, run_cli):
        code, output = run_cli("eos_name", "eosio.token")

        assert code == EXIT_OK
        assert output.strip() == "OK"

    def test_invalid_value(self, run_cli):
        code, output = run_cli("--field", "block", "eos_block_num", "12a")

        assert code == EXIT_INVALID
        assert output.strip() == "The block field must be a valid EOS block num"

    def test_default_field_name(self, run_cli):
        code, output = run_cli("hex", "zz")

        assert code == EXIT_INVALID
        assert output.strip() == "The value field must be a valid hexadecimal"

    def test_custom_message(self, run_cli):
        code, output = run_cli("--message", "nope", "hex", "zz")

        assert code == EXIT_INVALID
        assert output.strip() == "nope"

    def test_list_rule_takes_many_values(self, run_cli):
        code, output = run_cli("--field", "rows", "hex_slice", "ab", "x")

        assert code == EXIT_INVALID
        assert output.strip() == "The rows[1] field must be a valid hexadecimal"

    def test_json_output(self, run_cli):
        code, output = run_cli("--json", "cursor", "abc")

        data = json.loads(output)
        assert code == EXIT_INVALID
        assert data["valid"] is False
        assert data["error"]["message"] == "The value field is not a valid cursor"

    def test_json_output_valid(self, run_cli):
        code, output = run_cli("--json", "eos_trx_id", "ab" * 32)

        assert code == EXIT_OK
        assert json.loads(output) == {"valid": True}

    def test_unknown_tag(self, run_cli, capsys):
        code, output = run_cli("eos_asset", "1.0000 EOS")

        assert code == EXIT_USAGE
        assert output == ""
        assert "Unknown validation rule: eos_asset" in capsys.readouterr().err

    def test_scalar_rule_needs_one_value(self, run_cli):
        code, _ = run_cli("eos_name", "a", "b")
        assert code == EXIT_USAGE

    def test_missing_tag(self, run_cli):
        code, _ = run_cli()
        assert code == EXIT_USAGE

    def test_list_tags(self, run_cli):
        code, output = run_cli("--list")

        lines = output.splitlines()
        assert code == EXIT_OK
        assert "eos_name" in lines
        assert "hex_rows (deprecated, use hex_slice)" in lines
