"""Pytest fixtures for launchrank tests."""

import io
import os
import tempfile
from pathlib import Path
from typing import Dict, Generator, List

import pytest
from rich.console import Console

from launchrank.matching import Candidate
from launchrank.models import CandidateKind, SourceConfig
from launchrank.ui import RankTUI


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: pure algorithm tests without filesystem access")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def create_entry(path: Path, mode: int, content: str = "") -> Path:
    """Create a file with an exact permission mode (umask independent)."""
    path.write_text(content)
    os.chmod(path, mode)
    return path


@pytest.fixture
def launcher_tree(temp_dir: Path) -> Path:
    """Create a small tree of launchers, executables and files.

    Creates:
        root/
        ├── apps/
        │   ├── code.desktop      (0o644)
        │   └── firefox.desktop   (0o644)
        ├── bin/
        │   ├── fire              (0o700, owner execute)
        │   ├── firefox           (0o755)
        │   ├── group_exec        (0o610, group execute only)
        │   ├── notes.txt         (0o644)
        │   └── other_exec        (0o601, other execute only)
        └── readme.txt            (0o644)

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the root directory.
    """
    root = temp_dir / "root"
    root.mkdir()

    apps = root / "apps"
    apps.mkdir()
    create_entry(apps / "code.desktop", 0o644, "[Desktop Entry]\nName=Code\n")
    create_entry(apps / "firefox.desktop", 0o644, "[Desktop Entry]\nName=Firefox\n")

    bin_dir = root / "bin"
    bin_dir.mkdir()
    create_entry(bin_dir / "fire", 0o700, "#!/bin/sh\n")
    create_entry(bin_dir / "firefox", 0o755, "#!/bin/sh\n")
    create_entry(bin_dir / "group_exec", 0o610, "#!/bin/sh\n")
    create_entry(bin_dir / "notes.txt", 0o644, "notes")
    create_entry(bin_dir / "other_exec", 0o601, "#!/bin/sh\n")

    create_entry(root / "readme.txt", 0o644, "readme")

    return root


@pytest.fixture
def launcher_config(launcher_tree: Path) -> SourceConfig:
    """SourceConfig searching only the launcher tree."""
    return SourceConfig(roots=[launcher_tree])


@pytest.fixture
def example_candidates() -> List[Candidate]:
    """Candidates for the 'test' ranking example, in discovery order."""
    return [
        Candidate("other"),
        Candidate("test.txt"),
        Candidate("testing"),
    ]


@pytest.fixture
def tui_with_output() -> tuple[RankTUI, io.StringIO]:
    """Create a RankTUI with captured output.

    Returns:
        Tuple of (RankTUI instance, StringIO for reading output).
    """
    output = io.StringIO()
    console = Console(file=output, force_terminal=False, width=200)
    return RankTUI(console=console), output


@pytest.fixture
def environment(temp_dir: Path) -> Dict[str, str]:
    """An environment mapping with HOME and PATH pointing into temp_dir."""
    home = temp_dir / "home"
    home.mkdir()
    bin1 = temp_dir / "bin1"
    bin1.mkdir()
    bin2 = temp_dir / "bin2"
    bin2.mkdir()
    return {
        "HOME": str(home),
        "PATH": f"{bin1}::{bin2}:",
    }


@pytest.fixture
def executable_kinds() -> Dict[str, CandidateKind]:
    """Expected classification of every entry in launcher_tree."""
    return {
        "apps": CandidateKind.EXECUTABLE,
        "bin": CandidateKind.EXECUTABLE,
        "readme.txt": CandidateKind.FILE,
        "code.desktop": CandidateKind.FILE,
        "firefox.desktop": CandidateKind.FILE,
        "fire": CandidateKind.EXECUTABLE,
        "firefox": CandidateKind.EXECUTABLE,
        "group_exec": CandidateKind.EXECUTABLE,
        "notes.txt": CandidateKind.FILE,
        "other_exec": CandidateKind.EXECUTABLE,
    }
