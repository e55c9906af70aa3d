"""
Tests for the command line interface.
"""

from htc.cli import main
from tests.infrastructure.cli_utils import run_cli
from tests.infrastructure.file_utils import write


class TestCompileCommand:

    def test_compile_prints_expression(self, capsys):
        rc = main(["compile", "<b>${x}</b>"])

        assert rc == 0
        assert capsys.readouterr().out == '`"<b>"` + E(`x`) + `"</b>"`\n'

    def test_compile_with_context(self, capsys):
        rc = main(["compile", "${x}", "--context", "<a href='", "--dialect", "js"])

        assert rc == 0
        assert capsys.readouterr().out == "E(x)\n"

    def test_compile_element(self, capsys):
        rc = main(["compile", "--element", "<br>", "--dialect", "js"])

        assert rc == 0
        assert capsys.readouterr().out == '{innerHTML: "<br>"}\n'

    def test_template_error_exit_code(self, capsys):
        rc = main(["compile", "<div ${x}>"])

        captured = capsys.readouterr()
        assert rc == 2
        assert captured.out == ""
        assert captured.err == "Illegal insertion of placeholder (type $) into HTML template (at <div ): <div ${x}>\n"


class TestBuildCommand:

    def test_build(self, project, capsys):
        source = write(project / "src" / "main.coffee", "v = '<%= meta.version %>' # <%= channel %>\n")
        target = project / "out" / "main.coffee"

        rc = main(["build", str(source), str(target), "channel=beta", "--root", str(project)])

        assert rc == 0
        assert target.read_text(encoding="utf-8") == "v = '1.2.3' # beta\n"

    def test_bad_override(self, project, capsys):
        source = write(project / "in.txt", "x")

        rc = main(["build", str(source), str(project / "out.txt"), "oops", "--root", str(project)])

        assert rc == 2
        assert "Expected KEY=VALUE" in capsys.readouterr().err


class TestSubprocess:

    def test_build_in_project_root(self, project):
        write(project / "src" / "main.coffee", "<%= html('?{a}{<i>${b}</i>}') %>")

        cp = run_cli(project, "build", "src/main.coffee", "build/main.coffee")

        assert cp.returncode == 0, cp.stderr
        assert (project / "build" / "main.coffee").read_text(encoding="utf-8") == (
            '(innerHTML: (if `a` then `"<i>"` + E(`b`) + `"</i>"` else ""))'
        )

    def test_version_flag(self, tmp_path):
        cp = run_cli(tmp_path, "--version")

        assert cp.returncode == 0
        assert cp.stdout.startswith("htc ")
