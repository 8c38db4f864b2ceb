# tests/test_render_script.py
"""Tests for scripts/render_template.py"""
from __future__ import annotations

import importlib.util
import json

import pytest


@pytest.fixture
def render_script(scripts_dir):
    spec = importlib.util.spec_from_file_location(
        "render_template", scripts_dir / "render_template.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def files(tmp_path, translations):
    template = tmp_path / "welcome.liquid"
    template.write_text(
        "{{ 'layout:header.hello_user' | t: name: first_name, other: 'literal' }}",
        encoding="utf-8",
    )
    table = tmp_path / "en.json"
    table.write_text(json.dumps(translations), encoding="utf-8")
    return template, table


class TestRenderScript:
    def test_renders_with_inline_vars(self, render_script, files, capsys):
        template, table = files
        code = render_script.main([str(template), "-T", str(table), "--vars", '{"first_name": "John"}'])
        assert code == 0
        assert capsys.readouterr().out == "Hello John, literal!"

    def test_renders_with_vars_file(self, render_script, files, tmp_path, capsys):
        template, table = files
        vars_file = tmp_path / "vars.json"
        vars_file.write_text('{"first_name": "Ann"}', encoding="utf-8")
        code = render_script.main([str(template), "-T", str(table), "--vars-file", str(vars_file)])
        assert code == 0
        assert capsys.readouterr().out == "Hello Ann, literal!"

    def test_missing_template_file(self, render_script, files, tmp_path, capsys):
        _, table = files
        code = render_script.main([str(tmp_path / "nope.liquid"), "-T", str(table)])
        assert code == 2
        assert "Error" in capsys.readouterr().err

    def test_table_must_be_an_object(self, render_script, files, tmp_path, capsys):
        template, _ = files
        table = tmp_path / "list.json"
        table.write_text("[1, 2]", encoding="utf-8")
        code = render_script.main([str(template), "-T", str(table)])
        assert code == 2
        assert "expected a JSON object" in capsys.readouterr().err

    def test_invalid_vars_json(self, render_script, files, capsys):
        template, table = files
        code = render_script.main([str(template), "-T", str(table), "--vars", "{not json"])
        assert code == 2

    def test_template_syntax_error(self, render_script, files, tmp_path, capsys):
        _, table = files
        template = tmp_path / "bad.liquid"
        template.write_text("{% if x %}unterminated", encoding="utf-8")
        code = render_script.main([str(template), "-T", str(table)])
        assert code == 1
