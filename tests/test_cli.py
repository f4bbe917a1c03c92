import json

from typer.testing import CliRunner

from webdoc.cli import app

runner = CliRunner()


def test_ping():
    result = runner.invoke(app, ["ping"])
    assert result.exit_code == 0
    assert "pong" in result.output


def test_export_prints_json_tree():
    result = runner.invoke(app, ["export", "webdoc_sample:router"])
    assert result.exit_code == 0, result.output

    data = json.loads(result.output)
    users = data["routes"]["/users"]
    assert users["methods"]["GET"]["title"] == "List users"
    assert set(users["routes"]["/{user_id}"]["methods"]) == {"GET", "DELETE"}
    assert data["routes"]["/health"]["methods"]["GET"]["title"] == "Health check"


def test_export_to_file(tmp_path):
    out = tmp_path / "docs" / "tree.json"
    result = runner.invoke(app, ["export", "webdoc_sample:build_router", "--out", str(out)])
    assert result.exit_code == 0, result.output

    data = json.loads(out.read_text(encoding="utf-8"))
    assert "/users" in data["routes"]


def test_endpoints_table():
    result = runner.invoke(app, ["endpoints", "webdoc_sample:router"])
    assert result.exit_code == 0, result.output
    assert "Fetch one user" in result.output
    assert "Endpoints: 4" in result.output


def test_endpoints_json_filtered_by_method():
    result = runner.invoke(app, ["endpoints", "webdoc_sample:router", "--method", "delete", "--format", "json"])
    assert result.exit_code == 0, result.output

    rows = json.loads(result.output)
    assert rows == [
        {
            "method": "DELETE",
            "path": "/users/{user_id}",
            "title": "",
            "url_params": {"user_id": "string"},
        }
    ]


def test_tree_view():
    result = runner.invoke(app, ["tree", "webdoc_sample:router"])
    assert result.exit_code == 0, result.output
    assert "/users" in result.output
    assert "Health check" in result.output


def test_bad_target_is_reported():
    result = runner.invoke(app, ["tree", "webdoc_sample:not_a_router"])
    assert result.exit_code != 0


def test_bad_format_is_reported():
    result = runner.invoke(app, ["endpoints", "webdoc_sample:router", "--format", "xml"])
    assert result.exit_code != 0


def test_target_without_module_is_reported():
    result = runner.invoke(app, ["tree", ":router"])
    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)
