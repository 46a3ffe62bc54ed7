"""
Inclusion error tests

Tests circular include detection, missing includees, unreadable templates
and the exact backtrace text carried by each error.
"""

import os

import pytest

from mdinclude import Includer, CircularInclude, UnreadableInput
from mdinclude.lib.backtrace import BACKTRACE_LABEL, LEVEL_LINE_COUNT


def backtrace_levels(message):
    """Split an inclusion error message into (label, [level line lists])"""
    lines = message.split("\n")
    label = lines.pop(0)
    assert lines.pop(0) == BACKTRACE_LABEL
    step = 1 + LEVEL_LINE_COUNT
    assert len(lines) % step == 0
    return label, [lines[i:i + step] for i in range(0, len(lines), step)]


class TestCircularInclude:
    """Markdown inclusions that re-enter an active file"""

    def test_two_file_cycle(self, tmp_path, write):
        """A -> B -> A reports two levels, innermost first"""
        template = write("a.md", "@[:markdown](b.md)\n")
        write("b.md", "text\n@[:markdown](a.md)\n")
        output = tmp_path / "out.md"
        with pytest.raises(CircularInclude) as excinfo:
            Includer(root=tmp_path).include(template, output)
        assert str(excinfo.value).split("\n") == [
            "Includes are circular:",
            "  Backtrace (innermost include first):",
            "    Level 0:",
            "      Includer:",
            "        Location: b.md:2",
            "        Include description: @[:markdown](a.md)",
            "      Includee:",
            "        File path: a.md",
            "    Level 1:",
            "      Includer:",
            "        Location: a.md:1",
            "        Include description: @[:markdown](b.md)",
            "      Includee:",
            "        File path: b.md",
        ]
        assert not output.exists()

    def test_self_include(self, tmp_path, write):
        """A file including itself is a one-level cycle"""
        template = write("a.md", "intro\n@[markdown](a.md)\n")
        with pytest.raises(CircularInclude) as excinfo:
            Includer(root=tmp_path).include(template, tmp_path / "out.md")
        label, levels = backtrace_levels(str(excinfo.value))
        assert label == "Includes are circular:"
        assert len(levels) == 1
        assert levels[0][0] == "    Level 0:"
        assert levels[0][2] == "        Location: a.md:2"
        assert len(excinfo.value.inclusions) == 1

    def test_deep_cycle(self, tmp_path, write):
        template = write("a.md", "@[:markdown](b.md)\n")
        write("b.md", "@[:markdown](c.md)\n")
        write("c.md", "@[:markdown](b.md)\n")
        with pytest.raises(CircularInclude) as excinfo:
            Includer(root=tmp_path).include(template, tmp_path / "out.md")
        _, levels = backtrace_levels(str(excinfo.value))
        assert [level[5] for level in levels] == [
            "        File path: b.md",
            "        File path: c.md",
            "        File path: b.md",
        ]

    def test_cycle_through_symlink(self, tmp_path, write):
        """A symlinked spelling of the template closes the cycle"""
        template = write("a.md", "@[:markdown](alias.md)\n")
        os.symlink(template, tmp_path / "alias.md")
        with pytest.raises(CircularInclude) as excinfo:
            Includer(root=tmp_path).include(template, tmp_path / "out.md")
        _, levels = backtrace_levels(str(excinfo.value))
        assert len(levels) == 1

    def test_non_markdown_self_include_allowed(self, tmp_path, write):
        """Only markdown recurses, so a file may show itself as code"""
        template = write("a.md", "@[:code_block](a.md)\n")
        text = Includer(root=tmp_path, pristine=True).include(template, tmp_path / "out.md")
        assert text == "```a.md```:\n```\n@[:code_block](a.md)\n```\n"


class TestMissingIncludee:
    """Cited files that cannot be read"""

    @pytest.mark.parametrize("treatment", [":markdown", ":comment", ":pre", "ruby", ":code_block"])
    def test_any_treatment(self, tmp_path, write, treatment):
        template = write("t.md", f"@[{treatment}](missing.md)\n")
        output = tmp_path / "out.md"
        with pytest.raises(UnreadableInput) as excinfo:
            Includer(root=tmp_path).include(template, output)
        label, levels = backtrace_levels(str(excinfo.value))
        assert label == "Could not read include file,"
        assert len(levels) == 1
        assert levels[0][3] == f"        Include description: @[{treatment}](missing.md)"
        assert levels[0][5] == "        File path: missing.md"
        assert excinfo.value.path == tmp_path / "missing.md"
        assert not output.exists()

    @pytest.mark.parametrize("treatment", [":markdown", ":pre"])
    def test_nested_missing(self, tmp_path, write, treatment):
        """The chain leading to the missing file is reported, innermost first"""
        template = write("t.md", "@[:markdown](docs/a.md)\n")
        write("docs/a.md", f"one\ntwo\n@[{treatment}](../gone.md)\n")
        output = tmp_path / "out.md"
        with pytest.raises(UnreadableInput) as excinfo:
            Includer(root=tmp_path).include(template, output)
        _, levels = backtrace_levels(str(excinfo.value))
        assert len(levels) == 2
        assert levels[0][2] == f"        Location: {os.path.join('docs', 'a.md')}:3"
        assert levels[0][5] == "        File path: gone.md"
        assert levels[1][2] == "        Location: t.md:1"
        assert not output.exists()


class TestUnreadableTemplate:
    """The template itself cannot be read"""

    def test_missing_template(self, tmp_path):
        template = tmp_path / "nope.md"
        output = tmp_path / "out.md"
        with pytest.raises(UnreadableInput) as excinfo:
            Includer(root=tmp_path).include(template, output)
        assert str(excinfo.value) == f'Could not read input file.\n"{template}"'
        assert excinfo.value.inclusions == []
        assert not output.exists()

    def test_directory_template(self, tmp_path):
        with pytest.raises(UnreadableInput):
            Includer(root=tmp_path).include(tmp_path, tmp_path / "out.md")
