"""
Test Suite for Workshop CLI (cli_app.py).

Tests the Typer-based CLI utilities: override parsing, auto-casting,
and command invocation end to end.
"""

import re
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from workshop.cli_app import _auto_cast, _parse_overrides, app
from workshop.core.paths import DEFAULT_RECIPE_NAME

runner = CliRunner()


def _strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from Rich/Typer help output."""
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


# AUTO-CAST
@pytest.mark.unit
class TestAutoCast:
    """Tests for _auto_cast string-to-Python type conversion."""

    def test_int(self):
        assert _auto_cast("42") == 42
        assert isinstance(_auto_cast("42"), int)

    def test_float(self):
        assert _auto_cast("3.5") == pytest.approx(3.5)

    def test_bool(self):
        assert _auto_cast("true") is True
        assert _auto_cast("FALSE") is False

    def test_null(self):
        assert _auto_cast("null") is None
        assert _auto_cast("None") is None

    def test_string_passthrough(self):
        assert _auto_cast("plastic") == "plastic"
        assert _auto_cast("") == ""


# PARSE OVERRIDES
@pytest.mark.unit
class TestParseOverrides:
    """Tests for _parse_overrides CLI flag parsing."""

    def test_multiple_overrides(self):
        result = _parse_overrides(["orders.0.material=plastic", "telemetry.log_level=DEBUG"])
        assert result == {"orders.0.material": "plastic", "telemetry.log_level": "DEBUG"}

    def test_empty_list(self):
        assert _parse_overrides([]) == {}

    def test_value_with_equals(self):
        assert _parse_overrides(["key=a=b"]) == {"key": "a=b"}

    def test_whitespace_stripped(self):
        assert _parse_overrides(["  orders.0.store  =  table  "]) == {"orders.0.store": "table"}

    def test_missing_equals_raises(self):
        import typer

        with pytest.raises(typer.BadParameter, match="key=value"):
            _parse_overrides(["no_equals_here"])

    def test_empty_key_raises(self):
        import typer

        with pytest.raises(typer.BadParameter, match="Empty key"):
            _parse_overrides(["=value"])


# DEFAULT INVOCATION
@pytest.mark.integration
class TestDefaultRun:
    """The bare ``workshop`` command runs the demo orders silently."""

    def test_no_arguments_is_silent_success(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert result.output == ""

    def test_debug_env_shows_orders(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "1")
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "delivered WoodenChair" in result.output
        assert "delivered PlasticTable" in result.output

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "workshop-furniture" in result.output

    def test_help_lists_commands(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        clean = _strip_ansi(result.output)
        for command in ("order", "init", "run"):
            assert command in clean


# ORDER COMMAND
@pytest.mark.integration
class TestOrderCommand:
    def test_order_known_material_debug(self):
        result = runner.invoke(app, ["order", "table", "Wood", "--log-level", "DEBUG"])
        assert result.exit_code == 0
        assert "delivered WoodenTable" in result.output

    def test_order_unknown_material_is_silent(self):
        result = runner.invoke(app, ["order", "chair", "glass", "--log-level", "DEBUG"])
        assert result.exit_code == 0
        assert "delivered" not in result.output

    def test_order_unknown_store_fails(self):
        result = runner.invoke(app, ["order", "sofa", "wood"])
        assert result.exit_code == 1
        assert "Unknown store 'sofa'" in result.output

    def test_order_invalid_log_level_fails(self):
        result = runner.invoke(app, ["order", "chair", "wood", "--log-level", "LOUD"])
        assert result.exit_code == 1
        assert "log_level" in result.output


# INIT COMMAND
@pytest.mark.integration
class TestInitCommand:
    def test_init_writes_defaults(self, tmp_path):
        output = tmp_path / "starter.yaml"

        result = runner.invoke(app, ["init", str(output)])

        assert result.exit_code == 0
        assert "Recipe created" in result.output
        text = output.read_text(encoding="utf-8")
        assert text.startswith("# ====")
        data = yaml.safe_load(text)
        assert data["orders"] == [
            {"store": "chair", "material": "wood"},
            {"store": "table", "material": "plastic"},
        ]
        assert data["telemetry"] == {"log_level": "WARNING", "log_dir": None}

    def test_init_refuses_overwrite(self, tmp_path):
        output = tmp_path / "starter.yaml"
        output.write_text("keep me", encoding="utf-8")

        result = runner.invoke(app, ["init", str(output)])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert output.read_text(encoding="utf-8") == "keep me"

    def test_init_force_overwrites(self, tmp_path):
        output = tmp_path / "starter.yaml"
        output.write_text("old", encoding="utf-8")

        result = runner.invoke(app, ["init", str(output), "--force"])

        assert result.exit_code == 0
        assert "orders" in output.read_text(encoding="utf-8")

    def test_init_then_run(self, tmp_path):
        output = tmp_path / "starter.yaml"
        runner.invoke(app, ["init", str(output)])

        result = runner.invoke(app, ["run", str(output)])

        assert result.exit_code == 0
        assert result.output == ""


# RUN COMMAND
@pytest.mark.integration
class TestRunCommand:
    def test_run_missing_recipe(self):
        result = runner.invoke(app, ["run", "nonexistent.yaml"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_run_recipe_with_overrides(self, recipe_file):
        result = runner.invoke(
            app,
            [
                "run",
                str(recipe_file),
                "--set",
                "orders.0.material=plastic",
                "--set",
                "telemetry.log_level=DEBUG",
            ],
        )
        assert result.exit_code == 0
        assert "delivered PlasticChair" in result.output
        assert "delivered PlasticTable" in result.output
        assert "Orders placed: 2" in result.output

    def test_run_writes_log_file(self, recipe_file, tmp_path):
        log_dir = tmp_path / "logs"

        result = runner.invoke(
            app,
            [
                "run",
                str(recipe_file),
                "--set",
                "telemetry.log_level=DEBUG",
                "--set",
                f"telemetry.log_dir={log_dir}",
            ],
        )

        assert result.exit_code == 0
        log_files = list(log_dir.glob("Workshop_*.log"))
        assert len(log_files) == 1
        assert "delivered WoodenChair" in log_files[0].read_text(encoding="utf-8")

    def test_run_invalid_recipe(self, tmp_path):
        recipe = tmp_path / "bad.yaml"
        recipe.write_text("orders:\n    - store: sofa\n      material: wood\n", encoding="utf-8")

        result = runner.invoke(app, ["run", str(recipe)])

        assert result.exit_code == 1
        assert "invalid recipe" in result.output

    def test_run_bad_override_path(self, recipe_file):
        result = runner.invoke(app, ["run", str(recipe_file), "--set", "orders.9.store=chair"])
        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_run_malformed_override(self, recipe_file):
        result = runner.invoke(app, ["run", str(recipe_file), "--set", "oops"])
        assert result.exit_code != 0


# RUN COMMAND: MATERIAL COERCION AND MALFORMED RECIPES
@pytest.mark.integration
class TestRunRecipeEdgeCases:
    def test_numeric_material_override_is_silent_no_op(self, recipe_file):
        result = runner.invoke(
            app,
            [
                "run",
                str(recipe_file),
                "--set",
                "orders.0.material=123",
                "--set",
                "telemetry.log_level=DEBUG",
            ],
        )
        assert result.exit_code == 0
        assert "delivered WoodenChair" not in result.output
        assert "delivered PlasticTable" in result.output

    @pytest.mark.parametrize("material", ["42", "no", "3.5"])
    def test_non_string_yaml_material_is_silent_no_op(self, tmp_path, material):
        recipe = tmp_path / "scalar.yaml"
        recipe.write_text(
            f"orders:\n    - store: table\n      material: {material}\n", encoding="utf-8"
        )

        result = runner.invoke(app, ["run", str(recipe)])

        assert result.exit_code == 0
        assert result.output == ""

    def test_malformed_yaml_reports_error(self, tmp_path):
        recipe = tmp_path / "broken.yaml"
        recipe.write_text("orders: [\n  - store: chair\n", encoding="utf-8")

        result = runner.invoke(app, ["run", str(recipe)])

        assert result.exit_code == 1
        assert "not valid YAML" in result.output
        assert isinstance(result.exception, SystemExit)


# INIT COMMAND: DEFAULT OUTPUT
@pytest.mark.integration
def test_init_default_output_name():
    with runner.isolated_filesystem():
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert Path(DEFAULT_RECIPE_NAME).exists()
        assert DEFAULT_RECIPE_NAME in result.output
