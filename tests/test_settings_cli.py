"""
Settings and CLI pipeline tests
"""

from argparse import Namespace
from pathlib import Path

import pytest

from mdinclude import Includer, UnrecognizedOption
from mdinclude.config import AppSettings, settings_build
from mdinclude.models import ProgramState, pipeline
from mdinclude.__main__ import env_check, document_generate, results_report


class TestSettings:
    """Closed configuration structure"""

    def test_defaults(self):
        settings = settings_build()
        assert settings.pristine is False
        assert settings.root == Path.cwd()

    def test_known_options(self, tmp_path):
        settings = settings_build(pristine=True, root=tmp_path)
        assert settings.pristine is True
        assert settings.root == tmp_path

    def test_unknown_option_rejected(self):
        with pytest.raises(UnrecognizedOption) as excinfo:
            settings_build(pristine=True, bogus=1)
        assert excinfo.value.name == "bogus"
        assert str(excinfo.value) == "Unknown option: bogus"

    def test_includer_rejects_unknown_option(self):
        with pytest.raises(UnrecognizedOption):
            Includer(prisitne=True)

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("MDINCLUDE_PRISTINE", "true")
        assert AppSettings().pristine is True

    def test_prebuilt_settings(self, tmp_path):
        settings = settings_build(pristine=True, root=tmp_path)
        assert Includer(settings=settings).pristine is True

    def test_image_url_base(self):
        settings = settings_build(repo_user="me", repo_name="docs")
        assert settings.imageUrlBase_make() == "https://raw.githubusercontent.com/me/docs/master"


class TestPipeline:
    """CLI stages over ProgramState"""

    def state_make(self, inputdir, outputdir, **options):
        defaults = dict(
            inputFile="README.template.md",
            outputFile="README.md",
            operation="include",
            pristine=True,
            verbosity=0,
        )
        defaults.update(options)
        return ProgramState.state_createFromNamespace(
            Namespace(**defaults), inputdir=inputdir, outputdir=outputdir
        )

    def test_include_pipeline(self, tmp_path, write):
        write("in/README.template.md", "# Title\n@[:markdown](part.md)\n")
        write("in/part.md", "part\n")
        state = self.state_make(tmp_path / "in", tmp_path / "out")
        final = pipeline(state, env_check, document_generate, results_report)
        assert final.envOK is True
        assert final.generateResult["line_count"] == 2
        assert (tmp_path / "out" / "README.md").read_text() == "# Title\npart\n"

    def test_markers_relative_to_inputdir(self, tmp_path, write):
        write("in/README.template.md", "text\n")
        state = self.state_make(tmp_path / "in", tmp_path / "out", pristine=False)
        pipeline(state, env_check, document_generate)
        text = (tmp_path / "out" / "README.md").read_text()
        assert "SOURCE README.template.md -->" in text

    def test_missing_template_exits(self, tmp_path):
        (tmp_path / "in").mkdir()
        state = self.state_make(tmp_path / "in", tmp_path / "out")
        with pytest.raises(SystemExit):
            env_check(state)

    def test_inclusion_error_exits(self, tmp_path, write, capsys):
        write("in/README.template.md", "@[:markdown](README.template.md)\n")
        state = self.state_make(tmp_path / "in", tmp_path / "out")
        with pytest.raises(SystemExit):
            pipeline(state, env_check, document_generate)
        assert "Includes are circular:" in capsys.readouterr().err

    def test_unknown_namespace_keys_ignored(self, tmp_path):
        state = self.state_make(tmp_path, tmp_path, json=False, saveinputmeta=False)
        assert state.inputFile == "README.template.md"
