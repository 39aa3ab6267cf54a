"""Sequential tutorial pipeline: crawl, analyze, teach."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional

from .agents import (
    CODE_ANALYZER,
    REPO_CRAWLER,
    TEACHER,
    Agent,
    CodeAnalyzerAgent,
    RepoCrawlerAgent,
    TeacherAgent,
    UNKNOWN_ERROR,
    error_message,
)
from .config import RepoTutorConfig
from .logging import get_logger
from .models import PipelineRunResult, StepResult
from .providers import build_provider
from .tutorial import TutorialAssembler


class Orchestrator:
    """Runs the three agents in order and stops at the first failed step."""

    def __init__(
        self,
        crawler: RepoCrawlerAgent | None = None,
        analyzer: CodeAnalyzerAgent | None = None,
        teacher: TeacherAgent | None = None,
        config: RepoTutorConfig | None = None,
    ) -> None:
        self.config = config or RepoTutorConfig(root=Path.cwd())
        self.crawler = crawler or RepoCrawlerAgent(build_provider(self.config.provider))
        self.analyzer = analyzer or CodeAnalyzerAgent()
        self.teacher = teacher or TeacherAgent(TutorialAssembler(self.config.tutorial.format))
        self.logger = get_logger("orchestrator")

    def generate_tutorial(self, repo_url: str, *, tutorial_format: Optional[str] = None) -> PipelineRunResult:
        """Build a tutorial for ``repo_url``.

        Every attempted step is recorded in ``step_results`` under the agent's
        name. A failed step ends the run; later agents are never invoked and
        the overall error is prefixed with the failing agent's name.
        """
        result = PipelineRunResult()
        teacher = self.teacher
        if tutorial_format is not None:
            teacher = TeacherAgent(TutorialAssembler(tutorial_format))

        self.logger.info("Starting tutorial generation for %s", repo_url)

        crawl = self._run_step(result, self.crawler, lambda: self.crawler.execute(repo_url))
        if not crawl.success:
            return result
        snapshot = crawl.data

        analysis_step = self._run_step(result, self.analyzer, lambda: self.analyzer.execute(snapshot))
        if not analysis_step.success:
            return result
        analysis = analysis_step.data

        teach = self._run_step(result, teacher, lambda: teacher.execute(snapshot, analysis))
        if not teach.success:
            return result

        result.success = True
        result.document = teach.data
        self.logger.info("Tutorial generation finished for %s", repo_url)
        return result

    def get_agents_status(self) -> Dict[str, Dict[str, str]]:
        return {
            "crawler": self.crawler.describe(),
            "analyzer": self.analyzer.describe(),
            "teacher": self.teacher.describe(),
        }

    def _run_step(
        self,
        result: PipelineRunResult,
        agent: Agent,
        call: Callable[[], StepResult],
    ) -> StepResult:
        try:
            step = call()
        except Exception as exc:
            self.logger.exception("%s raised an unexpected error", agent.name)
            step = StepResult.failed(agent.name, error_message(exc))

        result.step_results[agent.name] = step
        if not step.success:
            result.error = f"{agent.name} failed: {step.error or UNKNOWN_ERROR}"
            self.logger.error("Pipeline stopped: %s", result.error)
        return step


__all__ = ["CODE_ANALYZER", "Orchestrator", "REPO_CRAWLER", "TEACHER"]
