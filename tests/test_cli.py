"""Tests for the deskkit command line."""

import json

import pytest
from click.testing import CliRunner

from deskkit.cli.main import cli
from deskkit.config import Settings
from deskkit.io.file_operations import FileOperations


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def make_obj(fake_picker, fake_prompt):
    def factory(paths=(), answers=()):
        ops = FileOperations(
            picker=fake_picker(*paths),
            prompt=fake_prompt(*answers),
            settings=Settings(),
        )
        return {'file_operations': ops}
    return factory


def test_hotkey(runner):
    result = runner.invoke(cli, ['hotkey', '^+s'])
    assert result.exit_code == 0
    assert result.output.strip() == "Ctrl+Shift+S"


def test_split_path_json(runner):
    result = runner.invoke(cli, ['split-path', '--json', 'C:\\docs\\a.txt'])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data['directory'] == "C:\\docs"
    assert data['extension'] == "txt"


def test_split_path_text(runner):
    result = runner.invoke(cli, ['split-path', '/srv/app/run.sh'])
    assert result.exit_code == 0
    assert "File name:  run.sh" in result.output


def test_shorten(runner):
    result = runner.invoke(cli, ['shorten', '--max-length', '12', 'one/two/three/four.txt'])
    assert result.exit_code == 0
    assert result.output.strip() == ".../four.txt"


def test_title_modes(runner):
    assert runner.invoke(cli, ['title', 'a.txt']).output.strip() == "*a.txt"
    assert runner.invoke(cli, ['title', '--clean', '*a.txt']).output.strip() == "a.txt"
    assert runner.invoke(cli, ['title', '--modified', '*a.txt']).output.strip() == "*a.txt"


def test_edit_width(runner):
    result = runner.invoke(cli, ['edit-width', '40', '--char-width', '7', '--padding', '6'])
    assert result.exit_code == 0
    assert result.output.strip() == "286"


def test_edit_width_error(runner):
    result = runner.invoke(cli, ['edit-width', '40', '--char-width', '0'])
    assert result.exit_code == 1
    assert "char_width" in result.output


def test_repeat(runner):
    result = runner.invoke(cli, ['repeat', 'ab', '3'])
    assert result.output.strip() == "ababab"


def test_save_and_load(runner, tmp_path, make_obj):
    target = str(tmp_path / "cli.txt")

    saved = runner.invoke(cli, ['save', target], input="from stdin\n", obj=make_obj())
    loaded = runner.invoke(cli, ['load', target], obj=make_obj())

    assert saved.exit_code == 0
    assert target in saved.output
    assert loaded.exit_code == 0
    assert loaded.output == "from stdin\n"


def test_save_from_input_file(runner, tmp_path, make_obj):
    source = tmp_path / "source.txt"
    source.write_text("file contents", encoding="utf-8")
    target = tmp_path / "copy.txt"

    result = runner.invoke(cli, ['save', str(target), '--input', str(source)], obj=make_obj())

    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8-sig") == "file contents"


def test_save_cancelled(runner, make_obj):
    result = runner.invoke(cli, ['save'], input="data", obj=make_obj(paths=[""]))
    assert result.exit_code == 1
    assert "Nothing saved" in result.output


def test_load_json_missing_file(runner, tmp_path, make_obj):
    result = runner.invoke(
        cli,
        ['load', '--json', str(tmp_path / "nope.txt")],
        obj=make_obj(answers=[False]),
    )
    assert result.exit_code == 1
    assert json.loads(result.output) == {"path": "", "contents": "", "error": 1}


def test_save_keeps_crlf(runner, tmp_path, make_obj):
    """Test CRLF line endings from stdin are written unchanged."""
    target = tmp_path / "crlf.txt"

    result = runner.invoke(cli, ['save', str(target)], input=b"one\r\ntwo\r\n", obj=make_obj())

    assert result.exit_code == 0
    assert target.read_bytes().decode("utf-8-sig") == "one\r\ntwo\r\n"


def test_save_rejects_non_utf8_input(runner, tmp_path, make_obj):
    target = tmp_path / "bad.txt"

    result = runner.invoke(cli, ['save', str(target)], input=b"\xff\xfe", obj=make_obj())

    assert result.exit_code == 1
    assert not target.exists()
