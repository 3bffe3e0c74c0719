import pytest
from pathlib import Path

from buildfind.config import loader
from buildfind.logging_setup import configure_logging


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Routes structlog through stdlib logging at warning level for every test."""
    configure_logging("warning")


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path_factory, monkeypatch):
    """Keeps the developer's ~/.config/buildfind out of every test."""
    fake_home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(loader, "USER_CONFIG_FILE", fake_home / "config.toml")


def create_tree(root: Path, files: dict) -> Path:
    # creates files (relative path -> content) under root, making parents as needed.
    for rel_path, content in files.items():
        target = root / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
    return root


@pytest.fixture
def make_tree():
    return create_tree


@pytest.fixture
def bazel_workspace(tmp_path: Path) -> Path:
    """A workspace with BUILD files at the root, in kept dirs and in ignored dirs."""
    root = tmp_path / "ws"
    create_tree(root, {
        "WORKSPACE": "",
        ".bazelignore": "# generated and vendored trees\nignored\na/ignored\n",
        "BUILD": "",
        "a/BUILD.bazel": "",
        "a/ignored/BUILD": "",
        "ignored/BUILD": "",
        "ignored/deeper/BUCK": "",
        "b/BUCK": "",
        "b/c/BUILD": "",
        "b/c/notes.txt": "",
        "b/BUILD.txt": "",
        "ignored_not/BUILD": "",
    })
    return root
