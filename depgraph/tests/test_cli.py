"""
depgraph/tests/test_cli.py — Tests for the depgraph command-line interface.
"""

import json

import pytest

from depgraph.cli import EXIT_CYCLE, EXIT_INPUT_ERROR, build_parser, main

CYCLIC_CSV = "from,to\ng:a:1.0,g:b:1.0\ng:b:1.0,g:a:1.0\n"
TRIANGLE_CSV = "from,to\ng:a:1.0,g:b:1.0\ng:b:1.0,g:c:1.0\ng:a:1.0,g:c:1.0\n"


class TestParser:

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_render_defaults(self):
        args = build_parser().parse_args(["render", "tree.json"])
        assert args.format == "dot"
        assert args.graph_name == "G"
        assert args.exclude_scope == []
        assert args.log_level == "WARNING"

    def test_unknown_format_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["render", "tree.json", "--format", "svg"])


class TestRender:

    def test_dot_to_stdout(self, write_json, tree_documents, capsys):
        assert main(["render", str(write_json(tree_documents))]) == 0
        out = capsys.readouterr().out
        assert out.startswith('digraph "G" {')
        assert '"com.example:web:jar"[label="web"]' in out

    def test_json_with_reduction(self, write_csv, capsys):
        path = write_csv(TRIANGLE_CSV)
        assert main(["render", str(path), "--format", "json", "--reduce"]) == 0
        document = json.loads(capsys.readouterr().out)
        assert len(document["dependencies"]) == 2

    def test_output_file(self, write_json, tree_documents, tmp_path):
        out_path = tmp_path / "deps.puml"
        code = main([
            "render", str(write_json(tree_documents)),
            "--format", "puml", "--graph-name", "deps", "-o", str(out_path),
        ])
        assert code == 0
        text = out_path.read_text(encoding="utf-8")
        assert text.startswith("@startuml")
        assert "title deps" in text

    def test_exclude_scope_and_optional(self, write_json, tree_documents, capsys):
        main([
            "render", str(write_json(tree_documents)),
            "--exclude-scope", "test", "--no-optional",
        ])
        out = capsys.readouterr().out
        assert "junit" not in out
        assert "jsr305" not in out

    def test_merge_by_group_id(self, write_json, tree_documents, capsys):
        main(["render", str(write_json(tree_documents)), "--merge-by-group-id"])
        out = capsys.readouterr().out
        assert '"com.example"[label="com.example"]' in out
        assert '"com.example" -> "com.example"' not in out

    def test_mixed_inputs(self, write_json, write_csv, tree_documents, capsys):
        json_path = write_json(tree_documents[0])
        csv_path = write_csv("from,to\norg.hamcrest:hamcrest-core:1.3,org.extra:lib:1.0\n")
        assert main(["render", str(json_path), str(csv_path)]) == 0
        assert '"org.extra:lib:jar"' in capsys.readouterr().out

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "deps.txt"
        path.write_text("", encoding="utf-8")
        assert main(["render", str(path)]) == EXIT_INPUT_ERROR

    def test_missing_file(self, tmp_path):
        assert main(["render", str(tmp_path / "nope.json")]) == EXIT_INPUT_ERROR

    def test_non_object_child(self, write_json):
        path = write_json({"groupId": "g", "artifactId": "a", "children": ["oops"]})
        assert main(["render", str(path)]) == EXIT_INPUT_ERROR
        assert main(["check", str(path)]) == EXIT_INPUT_ERROR

    def test_unwritable_output(self, write_json, tree_documents, tmp_path):
        out_path = tmp_path / "missing-dir" / "deps.dot"
        code = main(["render", str(write_json(tree_documents)), "-o", str(out_path)])
        assert code == EXIT_INPUT_ERROR
        assert not out_path.exists()


class TestCheck:

    def test_cycle_exit_code(self, write_csv, capsys):
        assert main(["check", str(write_csv(CYCLIC_CSV))]) == EXIT_CYCLE
        assert "Cycle: " in capsys.readouterr().out

    def test_acyclic(self, write_csv, capsys):
        assert main(["check", str(write_csv(TRIANGLE_CSV))]) == 0
        assert "No cycles (3 nodes, 3 edges)." in capsys.readouterr().out
