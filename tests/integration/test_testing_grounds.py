"""Integration tests: Rooter over a copy of testing_grounds (plugins, JSON config, packages)."""

from __future__ import annotations

from pathlib import Path

import pytest

from pathrooter import ModuleLoadError, Rooter


REPO_ROOT = Path(__file__).resolve().parent.parent.parent
TESTING_GROUNDS = REPO_ROOT / "testing_grounds"


@pytest.fixture
def fixture_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    if not TESTING_GROUNDS.is_dir():
        pytest.skip("testing_grounds not found")
    monkeypatch.setattr("pathrooter.config._global_config_dir", lambda: tmp_path / "home")
    import shutil
    dest = tmp_path / "project"
    shutil.copytree(TESTING_GROUNDS, dest, ignore=shutil.ignore_patterns("__pycache__"))
    return dest


@pytest.fixture
def rooter(fixture_project: Path) -> Rooter:
    return Rooter.from_project(fixture_project)


def test_plugins_load_in_order(rooter: Rooter) -> None:
    plugins = rooter.find_and_require("/plugins/*.py", "!/plugins/_*.py")
    assert [p.NAME for p in plugins] == ["alpha", "beta"]
    assert [p.run(10) for p in plugins] == [11, 20]


def test_disabled_plugin_aborts_whole_load(rooter: Rooter) -> None:
    with pytest.raises(ModuleLoadError, match="disabled plugin"):
        rooter.find_and_require("/plugins/*.py")


def test_settings_json(rooter: Rooter) -> None:
    settings = rooter.require("/config", "settings.json")
    assert settings["name"] == "testing-grounds"
    assert settings["plugins"] == [p.NAME for p in rooter.find_and_require("plugins/[!_]*.py")]


def test_core_package_relative_import(rooter: Rooter) -> None:
    core = rooter.require("core")
    assert core.safe_filename("a/b:c") == "a_b_c"
    assert Path(core.normalize_path(".")).is_absolute()


def test_project_config_excludes_drafts(rooter: Rooter, fixture_project: Path) -> None:
    assert str(fixture_project / "drafts" / "wip.py") not in rooter.find("**/*.py")
    # Explicit require is not subject to find's ignore patterns
    assert rooter.require("drafts/wip.py").NAME == "wip"


def test_execute_after_plugin_edit(rooter: Rooter, fixture_project: Path) -> None:
    alpha = fixture_project / "plugins" / "alpha.py"
    assert rooter.require("plugins/alpha.py").ORDER == 1
    alpha.write_text(alpha.read_text().replace("ORDER = 1", "ORDER = 5"))
    assert rooter.require("plugins/alpha.py").ORDER == 1
    assert rooter.execute("plugins/alpha.py").ORDER == 5
    assert [p.ORDER for p in rooter.find_and_require("plugins/[!_]*.py")] == [5, 2]
