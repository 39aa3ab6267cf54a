"""Shared constants for tutorial assembly."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

LANGUAGES: Tuple[str, ...] = (
    "JavaScript", "TypeScript", "Python", "Java", "Go", "Ruby", "PHP", "C++", "C#", "Rust",
)

FRAMEWORKS: Tuple[str, ...] = (
    "React", "Vue.js", "Angular", "Svelte", "Next.js", "Express.js",
    "Django", "Flask", "FastAPI", "Spring Boot",
)

TECH_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "JavaScript": "Core language for web development",
        "TypeScript": "JavaScript with static typing for better code quality",
        "Python": "Versatile language for backend and data processing",
        "Go": "Compiled language built for simple, concurrent services",
        "Rust": "Systems language focused on memory safety and performance",
        "Java": "Statically typed language for large backend systems",
        "React": "Popular UI library for building interactive interfaces",
        "Vue.js": "Progressive framework for building user interfaces",
        "Angular": "Full-featured framework for single-page applications",
        "Svelte": "Compiler-driven UI framework with minimal runtime",
        "Next.js": "React framework with server-side rendering",
        "Node.js": "JavaScript runtime for servers and tooling",
        "Express.js": "Minimal and flexible Node.js web framework",
        "Django": "High-level Python web framework",
        "Flask": "Lightweight Python web framework",
        "FastAPI": "Modern Python framework for typed HTTP APIs",
        "Vite": "Next-generation frontend build tool",
        "Webpack": "Module bundler for JavaScript applications",
        "Tailwind CSS": "Utility-first CSS framework",
        "Jest": "JavaScript testing framework",
        "Pytest": "Python testing framework",
        "PostgreSQL": "Powerful relational database",
        "MongoDB": "NoSQL document database",
        "Redis": "In-memory data structure store",
        "Docker": "Container platform for reproducible environments",
        "Kubernetes": "Container orchestration platform",
    }
)

DEFAULT_TECH_DESCRIPTION = "Technology used in this project"

DOCUMENTATION_LINKS: Mapping[str, str] = MappingProxyType(
    {
        "React": "https://react.dev",
        "Vue.js": "https://vuejs.org",
        "Angular": "https://angular.io",
        "TypeScript": "https://www.typescriptlang.org",
        "JavaScript": "https://developer.mozilla.org/en-US/docs/Web/JavaScript",
        "Python": "https://docs.python.org",
        "Django": "https://docs.djangoproject.com",
        "Flask": "https://flask.palletsprojects.com",
        "FastAPI": "https://fastapi.tiangolo.com",
        "Express.js": "https://expressjs.com",
        "Next.js": "https://nextjs.org/docs",
        "Node.js": "https://nodejs.org/docs",
    }
)

DOC_LINK_LIMIT = 5

LEARNING_PLATFORMS: Tuple[Tuple[str, str, str], ...] = (
    ("freeCodeCamp", "https://www.freecodecamp.org/", "Free coding tutorials"),
    ("MDN Web Docs", "https://developer.mozilla.org/", "Web development reference"),
    ("GitHub Skills", "https://skills.github.com/", "Interactive Git tutorials"),
)

COMMUNITY_TIPS: Tuple[str, ...] = (
    "Join discussions in the repository's Issues and Discussions",
    "Check Stack Overflow for common questions",
    "Connect with other learners on Discord or Reddit",
)

# (name substrings, tip); first match wins, generic tip otherwise
MODULE_TIPS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("component",), "Start by exploring the main components to understand the UI structure."),
    (("service",), "Services contain business logic - understand these to grasp core functionality."),
    (("api",), "API layer connects frontend to backend - trace the data flow here."),
    (("util", "helper"), "Utility functions are reusable helpers - great examples for learning best practices."),
    (("model",), "Models define data structure - understand these to work with the database."),
)

GENERIC_MODULE_TIP = "Examine the files in this module to understand its role in the project."

PREVIEW_LINES = 10
PREVIEW_TRUNCATION_MARKER = "..."

PREVIEW_LANGUAGES: Mapping[str, str] = MappingProxyType(
    {
        ".js": "javascript",
        ".jsx": "jsx",
        ".ts": "typescript",
        ".tsx": "tsx",
        ".py": "python",
        ".json": "json",
        ".md": "markdown",
        ".yml": "yaml",
        ".yaml": "yaml",
        ".toml": "toml",
        ".go": "go",
        ".rs": "rust",
        ".java": "java",
        ".html": "html",
        ".css": "css",
        ".sh": "bash",
    }
)

FOOTER = (
    "*This tutorial was generated by repotutor from a static analysis of the repository. "
    "Verify commands against the project's own documentation before running them.*"
)

# Learning journey

DIFFICULTY_BEGINNER = "beginner"
DIFFICULTY_INTERMEDIATE = "intermediate"
DIFFICULTY_ADVANCED = "advanced"

ADVANCED_CONCEPTS: Tuple[str, ...] = ("GraphQL", "WebSocket", "Middleware", "SSR")
ADVANCED_TECH: Tuple[str, ...] = ("Rust", "Go", "Kubernetes", "WebAssembly")

BASE_PREREQUISITES: Tuple[str, ...] = ("Basic programming knowledge", "Git fundamentals")

LEARNING_OBJECTIVES: Tuple[str, ...] = (
    "Understand how the project works",
    "Run it locally and explore the codebase",
    "Modify key components and features",
    "Implement a small new feature independently",
)

STAGE_SETUP = "Setup & Run"
STAGE_ARCHITECTURE = "Architecture & Core Logic"
STAGE_FEATURES = "Feature Exploration"
STAGE_BUILD = "Build Your Own"

STAGE_ORDER: Tuple[str, ...] = (STAGE_SETUP, STAGE_ARCHITECTURE, STAGE_FEATURES, STAGE_BUILD)

INSTALL_DISTRACTORS: Tuple[str, ...] = (
    "npm install",
    "pip install -r requirements.txt",
    "yarn install",
    "poetry install",
)

INSTALL_UNKNOWN_ANSWER = "Depends on the tech stack"

ENTRY_DISTRACTORS: Tuple[str, ...] = ("README.md", "package.json", ".gitignore")

FINAL_PROJECT_GOAL = "Apply all learned concepts to extend the app meaningfully"
FINAL_PROJECT_DESCRIPTION = (
    "Add a new feature that integrates with the existing codebase "
    "(e.g., new UI component, API endpoint, or utility function)."
)
FINAL_PROJECT_LEARNING: Tuple[str, ...] = (
    "Full understanding of the repository structure",
    "Confidence modifying and extending open-source code",
    "Ability to read, trace, and refactor complex codebases",
)
