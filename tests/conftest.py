from __future__ import annotations

from pathlib import Path

import pytest

from repotutor.analyzers import CodeAnalyzer
from repotutor.models import AnalysisResult, RepositorySnapshot
from tests._fixtures.repo_builder import RepoBuilder
from tests._fixtures.snapshots import react_app_snapshot


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable repo builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture
def react_snapshot() -> RepositorySnapshot:
    return react_app_snapshot()


@pytest.fixture
def react_analysis(react_snapshot: RepositorySnapshot) -> AnalysisResult:
    return CodeAnalyzer().analyze(react_snapshot)
