"""Markdown tutorial rendering backed by Jinja templates."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import AnalysisResult, ModuleInfo, RepoMetadata, RepositorySnapshot
from .constants import (
    COMMUNITY_TIPS,
    DEFAULT_TECH_DESCRIPTION,
    DOC_LINK_LIMIT,
    DOCUMENTATION_LINKS,
    FOOTER,
    FRAMEWORKS,
    GENERIC_MODULE_TIP,
    LANGUAGES,
    LEARNING_PLATFORMS,
    MODULE_TIPS,
    PREVIEW_LANGUAGES,
    PREVIEW_LINES,
    PREVIEW_TRUNCATION_MARKER,
    TECH_DESCRIPTIONS,
)

TEMPLATE_NAME = "tutorial.md.j2"

_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")
_PREVIEW_TOKEN_PREFIX = "@@repotutor-preview-"


def categorize_tech_stack(tech_stack: Sequence[str]) -> Dict[str, List[str]]:
    """Split labels into languages, frameworks and tools (everything else)."""
    return {
        "languages": [tech for tech in tech_stack if tech in LANGUAGES],
        "frameworks": [tech for tech in tech_stack if tech in FRAMEWORKS],
        "tools": [tech for tech in tech_stack if tech not in LANGUAGES and tech not in FRAMEWORKS],
    }


def module_learning_tip(module_name: str) -> str:
    lowered = module_name.lower()
    for needles, tip in MODULE_TIPS:
        if any(needle in lowered for needle in needles):
            return tip
    return GENERIC_MODULE_TIP


def community_size(stars: int) -> str:
    if stars > 10000:
        return "Large and active"
    if stars > 1000:
        return "Active community"
    if stars > 100:
        return "Growing community"
    return "Small community"


def build_preview(path: str, content: Optional[str]) -> Optional[Dict[str, str]]:
    """Return the first lines of ``content`` for a fenced block, or ``None`` without content."""
    if not content:
        return None
    lines = content.splitlines()
    code_lines = lines[:PREVIEW_LINES]
    if len(lines) > PREVIEW_LINES:
        code_lines.append(PREVIEW_TRUNCATION_MARKER)
    suffix = Path(path).suffix.lower()
    return {
        "language": PREVIEW_LANGUAGES.get(suffix, ""),
        "code": "\n".join(code_lines),
    }


class MarkdownTutorialBuilder:
    """Renders a fixed-order Markdown tutorial from the analysis record."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = self._create_env(self.templates_dir)

    def build(self, snapshot: RepositorySnapshot, analysis: AnalysisResult) -> str:
        context = self.build_context(snapshot, analysis)
        previews = self._hold_previews(context["files"])  # type: ignore[arg-type]
        template = self._env.get_template(TEMPLATE_NAME)
        rendered = template.render(**context)
        document = _EXCESS_BLANK_LINES.sub("\n\n", rendered).strip() + "\n"
        # Preview bodies go back in after the collapse and keep their blank lines.
        for token, code in previews.items():
            document = document.replace(token, code, 1)
        return document

    def build_context(self, snapshot: RepositorySnapshot, analysis: AnalysisResult) -> Dict[str, object]:
        metadata = snapshot.metadata or RepoMetadata()
        return {
            "title": metadata.name or "Repository",
            "overview": self._overview(metadata, analysis),
            "stats": {
                "language": metadata.primary_language or "Not specified",
                "stars": metadata.star_count,
                "forks": metadata.fork_count,
                "community": community_size(metadata.star_count),
            },
            "tech_groups": self._tech_groups(analysis.tech_stack),
            "modules": [self._module_entry(module) for module in analysis.core_modules],
            "files": [
                {
                    "path": item.path,
                    "description": item.description,
                    "preview": build_preview(item.path, snapshot.key_files.get(item.path)),
                }
                for item in analysis.important_files
            ],
            "learning_path": self._learning_path(analysis),
            "exercises": self._exercises(analysis.tech_stack),
            "doc_links": [
                {"label": tech, "url": DOCUMENTATION_LINKS[tech]}
                for tech in analysis.tech_stack[:DOC_LINK_LIMIT]
                if tech in DOCUMENTATION_LINKS
            ],
            "platforms": [
                {"name": name, "url": url, "summary": summary}
                for name, url, summary in LEARNING_PLATFORMS
            ],
            "community": list(COMMUNITY_TIPS),
            "footer": FOOTER,
        }

    @staticmethod
    def _hold_previews(files: List[Dict[str, object]]) -> Dict[str, str]:
        """Swap each preview body for a placeholder token and return the originals."""
        held: Dict[str, str] = {}
        for index, entry in enumerate(files):
            preview = entry.get("preview")
            if not isinstance(preview, dict):
                continue
            token = f"{_PREVIEW_TOKEN_PREFIX}{index}@@"
            held[token] = preview["code"]
            entry["preview"] = {**preview, "code": token}
        return held

    @staticmethod
    def _overview(metadata: RepoMetadata, analysis: AnalysisResult) -> str:
        if analysis.summary:
            return analysis.summary
        if metadata.description:
            return metadata.description
        return "This tutorial walks through the repository structure and how to start contributing."

    @staticmethod
    def _tech_groups(tech_stack: Sequence[str]) -> List[Dict[str, object]]:
        categories = categorize_tech_stack(tech_stack)
        titles = (("languages", "Languages"), ("frameworks", "Frameworks"), ("tools", "Tools & Libraries"))
        groups: List[Dict[str, object]] = []
        for key, title in titles:
            labels = categories[key]
            if not labels:
                continue
            groups.append(
                {
                    "title": title,
                    "entries": [
                        {"label": label, "description": TECH_DESCRIPTIONS.get(label, DEFAULT_TECH_DESCRIPTION)}
                        for label in labels
                    ],
                }
            )
        return groups

    @staticmethod
    def _module_entry(module: ModuleInfo) -> Dict[str, object]:
        return {
            "name": module.name,
            "purpose": module.purpose,
            "files": list(module.files),
            "tip": module_learning_tip(module.name),
        }

    @staticmethod
    def _learning_path(analysis: AnalysisResult) -> List[Dict[str, object]]:
        setup = ["Clone the repository", "Install dependencies"]
        install_hint = _install_hint(analysis)
        if install_hint:
            setup.append(install_hint)
        setup.append("Review the README for setup instructions")

        entry_hint = (
            f"Start with the entry point (`{analysis.entry_points[0]}`)"
            if analysis.entry_points
            else "Start with the entry point (main.ts, index.js, or app.py)"
        )

        if analysis.core_modules:
            modules_intro = "Focus on these critical modules:"
            module_lines = [f"{module.name}: {module.purpose}" for module in analysis.core_modules[:3]]
        else:
            modules_intro = ""
            module_lines = ["Examine the folder structure", "Read through major components"]

        return [
            {"title": "Setup Environment", "intro": "", "lines": setup},
            {
                "title": "Explore Core Files",
                "intro": "",
                "lines": [
                    entry_hint,
                    "Trace the application flow from initialization",
                    "Identify configuration files",
                ],
            },
            {"title": "Study Key Modules", "intro": modules_intro, "lines": module_lines},
            {
                "title": "Run the Project",
                "intro": "",
                "lines": [
                    "Start the development server",
                    "Test core functionality",
                    "Make small changes and observe results",
                ],
            },
            {
                "title": "Experiment",
                "intro": "",
                "lines": [
                    "Try adding a new feature",
                    "Modify existing components",
                    "Write tests for your changes",
                ],
            },
        ]

    @staticmethod
    def _exercises(tech_stack: Sequence[str]) -> List[Dict[str, object]]:
        exploration = {
            "title": "Code Exploration",
            "objective": "Understand the codebase structure",
            "tasks": [
                "Identify the main entry point of the application",
                "Map out the folder structure and its purpose",
                "Find where configuration is stored",
                "Document your findings in a simple diagram",
            ],
            "duration": "30-45 minutes",
            "challenge": "",
        }

        if "React" in tech_stack or "Vue.js" in tech_stack:
            tasks = [
                "Create a new component that displays project statistics",
                "Add a button that triggers a simple action",
                "Style your component using the project's styling approach",
                "Test your component in the application",
            ]
        elif "Python" in tech_stack:
            tasks = [
                "Add a new API endpoint",
                "Implement basic input validation",
                "Write unit tests for your endpoint",
                "Document your API endpoint",
            ]
        else:
            tasks = [
                "Add a new feature or improve an existing one",
                "Follow the project's coding conventions",
                "Write tests for your changes",
                "Document what you built",
            ]

        implementation = {
            "title": "Feature Implementation",
            "objective": "Apply your knowledge by building something new",
            "tasks": tasks,
            "duration": "1-2 hours",
            "challenge": "Can you make your feature reusable for other parts of the application?",
        }
        return [exploration, implementation]

    @staticmethod
    def _create_env(templates_dir: Path) -> Environment:
        directories = [str(templates_dir)]
        default_dir = str(Path(__file__).with_name("templates"))
        if default_dir not in directories:
            directories.append(default_dir)
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


def _install_hint(analysis: AnalysisResult) -> Optional[str]:
    if analysis.dev_commands.known:
        return f"Run `{analysis.dev_commands.install}`"
    if "Node.js" in analysis.tech_stack:
        return "Run `npm install` or `yarn install`"
    if "Python" in analysis.tech_stack:
        return "Run `pip install -r requirements.txt`"
    return None


__all__ = [
    "MarkdownTutorialBuilder",
    "build_preview",
    "categorize_tech_stack",
    "community_size",
    "module_learning_tip",
]
