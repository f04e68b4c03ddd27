"""Tests for the command line front end."""

from pathlib import Path

import pytest

from xmlminus.cli import SUCCESS_MESSAGE, main


@pytest.fixture
def write_doc(tmp_path: Path):
    def write(text: str) -> Path:
        path = tmp_path / "doc.xml"
        path.write_text(text, encoding="utf-8")
        return path

    return write


class TestSuccess:
    """Accepted documents print the derivation and exit 0."""

    def test_prints_derivation(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(write_doc("<a></a>"))]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "document ::= element EOF"
        assert "endTag ::= </ NAME >" in out
        assert out[-1] == SUCCESS_MESSAGE

    def test_quiet(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--quiet", str(write_doc("<a/>"))]) == 0
        assert capsys.readouterr().out == ""

    def test_tokens(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--tokens", "--quiet", str(write_doc('<a x="1"/>'))]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[:4] == ["OPEN <", "NAME a", "NAME x", "ASSIGN ="]
        assert "END_OF_INPUT &$" in out


class TestFailure:
    """Rejected documents report on stderr with a distinct exit status."""

    def test_tag_mismatch_exits_2(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(write_doc("<a></b>"))]) == 2
        captured = capsys.readouterr()
        assert "expected 'a' but found 'b'" in captured.err
        assert SUCCESS_MESSAGE not in captured.out

    def test_duplicate_attribute_exits_3(self, write_doc) -> None:
        assert main([str(write_doc('<a x="1" x="2"/>'))]) == 3

    def test_syntax_error_exits_1(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(write_doc("<a/><b/>"))]) == 1
        assert "Syntax error" in capsys.readouterr().err

    def test_lex_error_exits_1(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(write_doc("<a>&</a>"))]) == 1
        assert "Scanner error" in capsys.readouterr().err

    def test_empty_file_exits_1(self, write_doc) -> None:
        assert main([str(write_doc(""))]) == 1

    def test_missing_file_exits_1(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "missing.xml")]) == 1
        assert "Failed to read" in capsys.readouterr().err

    def test_strict_mode(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        path = write_doc('<a x=="1"/>')
        assert main(["--strict", str(path)]) == 1
        assert "misplaced assignment" in capsys.readouterr().err
