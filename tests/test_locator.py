"""Tests for grcat/locator.py"""

from pathlib import Path

from grcat.locator import SYSTEM_DIRS, candidate_dirs, find_config


class TestCandidateDirs:
    def test_defaults_under_home(self, tmp_path):
        dirs = candidate_dirs(environ={}, home=tmp_path)
        assert dirs == [
            tmp_path / ".config" / "grc",
            tmp_path / ".local" / "share" / "grc",
            tmp_path / ".grc",
            Path("/usr/local/share/grc"),
            Path("/usr/share/grc"),
        ]

    def test_xdg_overrides(self, tmp_path):
        env = {"XDG_CONFIG_HOME": "/xdg/config", "XDG_DATA_HOME": "/xdg/data"}
        dirs = candidate_dirs(environ=env, home=tmp_path)
        assert dirs[0] == Path("/xdg/config/grc")
        assert dirs[1] == Path("/xdg/data/grc")

    def test_empty_xdg_uses_default(self, tmp_path):
        dirs = candidate_dirs(environ={"XDG_CONFIG_HOME": ""}, home=tmp_path)
        assert dirs[0] == tmp_path / ".config" / "grc"

    def test_extra_dirs_first(self, tmp_path):
        dirs = candidate_dirs(environ={}, home=tmp_path, extra_dirs=["/opt/a", "/opt/b"])
        assert dirs[:2] == [Path("/opt/a"), Path("/opt/b")]
        assert [str(d) for d in dirs[-2:]] == list(SYSTEM_DIRS)


class TestFindConfig:
    def test_first_match_wins(self, tmp_path):
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        (first / "conf.log").write_text("regexp=a\n")
        (second / "conf.log").write_text("regexp=b\n")
        assert find_config("conf.log", [first, second]) == first / "conf.log"

    def test_skips_missing_dirs(self, tmp_path):
        (tmp_path / "conf.log").write_text("")
        found = find_config("conf.log", [tmp_path / "missing", tmp_path])
        assert found == tmp_path / "conf.log"

    def test_skips_directory_with_same_name(self, tmp_path):
        a = tmp_path / "a"
        b = tmp_path / "b"
        (a / "conf.log").mkdir(parents=True)
        b.mkdir()
        (b / "conf.log").write_text("")
        assert find_config("conf.log", [a, b]) == b / "conf.log"

    def test_not_found(self, tmp_path):
        assert find_config("conf.nothing", [tmp_path]) is None

    def test_path_used_directly(self, tmp_path):
        path = tmp_path / "rules" / "conf.custom"
        path.parent.mkdir()
        path.write_text("")
        assert find_config(str(path), []) == path
