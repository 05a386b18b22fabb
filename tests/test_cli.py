"""Tests for the gqn command line interface."""

import json

import pytest
from typer.testing import CliRunner

from graphql_query_normalizer.cli import app

runner = CliRunner()


@pytest.fixture
def invoke(tmp_path):
    """Run the CLI with an isolated (missing) config file."""
    config_path = str(tmp_path / "config.yaml")

    def _invoke(*args: str):
        return runner.invoke(app, ["--config", config_path, *args])

    return _invoke


@pytest.fixture
def write(tmp_path):
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content)
        return str(path)

    return _write


@pytest.mark.parametrize(
    "args",
    [[], ["parse"], ["operation"], ["validate"], ["config", "init"]],
    ids=["root", "parse", "operation", "validate", "config-init"],
)
def test_help(args):
    result = runner.invoke(app, [*args, "--help"])
    assert result.exit_code == 0
    assert "Usage" in result.output


class TestParseCommand:
    def test_json_output(self, invoke, write):
        query = write("q.graphql", "{ devices { ...F } } fragment F on Device { id }")
        result = invoke("parse", query, "--output", "json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        devices = data["nodes"][0]["selection_set"]["nodes"][0]
        assert devices["selection_set"]["nodes"][0]["kind"] == "fragment_spread"

    def test_expand(self, invoke, write):
        query = write("q.graphql", "{ devices { ...F } } fragment F on Device { id }")
        result = invoke("parse", query, "--expand", "--output", "json")
        assert result.exit_code == 0
        devices = json.loads(result.output)["nodes"][0]["selection_set"]["nodes"][0]
        assert devices["selection_set"]["nodes"][0]["name"] == "id"

    def test_console_output(self, invoke, write):
        query = write("q.graphql", "query Devices { devices { id } }")
        result = invoke("parse", query)
        assert result.exit_code == 0
        assert "query Devices" in result.output

    def test_syntax_error(self, invoke, write):
        query = write("q.graphql", "{ devices ")
        result = invoke("parse", query)
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_missing_file(self, invoke, tmp_path):
        result = invoke("parse", str(tmp_path / "missing.graphql"))
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_depth_limit_from_config(self, write):
        config_path = write("config.yaml", "max_depth: 1\n")
        query = write("q.graphql", "{ a { b } }")
        result = runner.invoke(app, ["--config", config_path, "parse", query])
        assert result.exit_code == 1
        assert "nesting depth" in result.output


class TestOperationCommand:
    def test_prints_first_operation(self, invoke, write):
        query = write("q.graphql", "mutation M { ping { ...F } } query Q { hello } fragment F on Ping { ok }")
        result = invoke("operation", query, "--output", "json")
        assert result.exit_code == 0
        (operation,) = json.loads(result.output)["nodes"]
        assert operation["kind"] == "mutation"
        assert operation["name"] == "M"
        assert operation["selection_set"]["nodes"][0]["selection_set"]["nodes"][0]["name"] == "ok"

    def test_no_operation(self, invoke, write):
        query = write("q.graphql", "fragment F on Query { hello }")
        result = invoke("operation", query)
        assert result.exit_code == 1
        assert "No query or mutation" in result.output


class TestValidateCommand:
    def test_success(self, invoke, write):
        query = write("q.graphql", "{ hello }")
        schema = write("schema.graphql", "type Query { hello: String }")
        result = invoke("validate", query, "--schema", schema)
        assert result.exit_code == 0
        assert "Success" in result.output

    def test_missing_mutation_type(self, invoke, write):
        query = write("q.graphql", "mutation { ping }")
        schema = write("schema.graphql", "type Query { hello: String }")
        result = invoke("validate", query, "--schema", schema)
        assert result.exit_code == 2
        assert "SchemaDoesNotHaveMutationType" in result.output

    def test_legacy_mutation_check(self, invoke, write):
        query = write("q.graphql", "mutation { ping }")
        schema = write("schema.graphql", "type Query { hello: String }")
        result = invoke("validate", query, "--schema", schema, "--legacy-mutation-check")
        assert result.exit_code == 0

    def test_legacy_mutation_check_from_config(self, write):
        config_path = write("config.yaml", "legacy_mutation_check: true\n")
        query = write("q.graphql", "mutation { ping }")
        schema = write("schema.graphql", "type Query { hello: String }")
        result = runner.invoke(app, ["--config", config_path, "validate", query, "--schema", schema])
        assert result.exit_code == 0

    def test_no_legacy_mutation_check_overrides_config(self, write):
        config_path = write("config.yaml", "legacy_mutation_check: true\n")
        query = write("q.graphql", "mutation { ping }")
        schema = write("schema.graphql", "type Query { hello: String }")
        result = runner.invoke(
            app,
            ["--config", config_path, "validate", query, "--schema", schema, "--no-legacy-mutation-check"],
        )
        assert result.exit_code == 2
        assert "SchemaDoesNotHaveMutationType" in result.output

    def test_no_operation(self, invoke, write):
        query = write("q.graphql", "fragment F on Query { hello }")
        schema = write("schema.graphql", "type Query { hello: String }")
        result = invoke("validate", query, "--schema", schema)
        assert result.exit_code == 2
        assert "NoQueryOrMutationProvided" in result.output

    def test_invalid_schema(self, invoke, write):
        query = write("q.graphql", "{ hello }")
        schema = write("schema.graphql", "type Query {")
        result = invoke("validate", query, "--schema", schema)
        assert result.exit_code == 1
        assert "Error" in result.output


def test_config_init(tmp_path):
    path = tmp_path / "out" / "config.yaml"
    result = runner.invoke(app, ["config", "init", "--path", str(path)])
    assert result.exit_code == 0
    assert path.exists()


def test_unknown_log_level_in_config(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("log_level: loud\n")
    query = tmp_path / "q.graphql"
    query.write_text("{ hello }")
    result = runner.invoke(app, ["--config", str(config_path), "parse", str(query)])
    assert result.exit_code == 1
    assert "Unknown log_level" in result.output
