"""Static lookup tables driving the repository classifier.

Every table is immutable and versioned through ``RULES_VERSION`` so heuristics
can be tuned without touching control flow. Order matters: detection output
follows declaration order.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

RULES_VERSION = 1

# label -> trigger substrings (matched against the lower-cased search corpus)
TECH_STACK_TRIGGERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("JavaScript", (".js", "javascript")),
    ("TypeScript", (".ts", "typescript")),
    ("Python", (".py", "python", "requirements.txt")),
    ("React", ("react", ".jsx", ".tsx")),
    ("Vue.js", ("vue",)),
    ("Angular", ("angular",)),
    ("Svelte", ("svelte",)),
    ("Next.js", ("next.config", "nextjs", '"next"')),
    ("Node.js", ("package.json", "node_modules", "nodejs", "node.js")),
    ("Express.js", ("express",)),
    ("Django", ("django",)),
    ("Flask", ("flask",)),
    ("FastAPI", ("fastapi",)),
    ("Go", (".go", "go.mod")),
    ("Rust", (".rs", "cargo.toml")),
    ("Java", (".java", "pom.xml", "build.gradle")),
    ("Vite", ("vite",)),
    ("Webpack", ("webpack",)),
    ("Tailwind CSS", ("tailwind",)),
    ("Jest", ("jest",)),
    ("Pytest", ("pytest",)),
    ("PostgreSQL", ("postgres",)),
    ("MongoDB", ("mongo",)),
    ("Redis", ("redis",)),
    ("Docker", ("dockerfile", "docker-compose")),
    ("Kubernetes", ("kubernetes", "k8s/", "helm/")),
)

CONCEPT_TRIGGERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("SSR", ("ssr", "server-side")),
    ("REST API", ("api", "endpoint")),
    ("GraphQL", ("graphql",)),
    ("WebSocket", ("websocket",)),
    ("State Management", ("redux", "zustand", "state")),
    ("Component-based UI", ("component",)),
    ("Routing", ("routing", "router")),
    ("Middleware", ("middleware",)),
    ("Authentication", ("authentication", "auth")),
    ("Database", ("database", "db")),
)

MAX_CONCEPTS = 8

# directory fragment -> (module label, purpose)
MODULE_FRAGMENTS: Tuple[Tuple[str, str, str], ...] = (
    ("components", "UI Components", "Reusable UI building blocks"),
    ("services", "Business Services", "Core business logic and external integrations"),
    ("utils", "Utility Functions", "Helper functions and utilities"),
    ("api", "API Layer", "Backend API endpoints and routes"),
    ("pages", "Application Pages", "Top-level page components and views"),
    ("hooks", "Custom Hooks", "Reusable React hooks for state and side effects"),
    ("models", "Data Models", "Data structures and schemas"),
    ("controllers", "Controllers", "Request handlers and business logic"),
    ("store", "State Store", "Global state management"),
)

MAX_MODULE_FILES = 5
MAX_KEY_SYMBOLS = 3
SYMBOL_EXTENSIONS: Tuple[str, ...] = (".tsx", ".ts", ".jsx", ".js", ".py")

ENTRY_POINT_PATTERNS: Tuple[str, ...] = (
    "index.js", "index.ts", "index.tsx", "index.jsx",
    "main.js", "main.ts", "main.tsx", "main.py",
    "app.js", "app.ts", "app.tsx", "app.py",
    "server.js", "server.ts",
    "src/index", "src/main", "src/app",
)

MAX_ENTRY_POINTS = 5

# (markers, package manager) evaluated in priority order
PACKAGE_MANAGER_MARKERS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("package-lock.json",), "npm"),
    (("yarn.lock",), "yarn"),
    (("pnpm-lock.yaml",), "pnpm"),
    (("poetry.lock", "pyproject.toml"), "poetry"),
    (("requirements.txt", "pipfile"), "pip"),
)

UNKNOWN = "unknown"

DEV_COMMANDS: Mapping[str, Tuple[str, str, str]] = MappingProxyType(
    {
        "npm": ("npm install", "npm run dev", "npm test"),
        "yarn": ("yarn install", "yarn dev", "yarn test"),
        "pnpm": ("pnpm install", "pnpm dev", "pnpm test"),
        "pip": ("pip install -r requirements.txt", "python main.py", "pytest"),
        "poetry": ("poetry install", "poetry run python main.py", "poetry run pytest"),
    }
)

FLOW_ENTRY_TO_PAGES = "Entry point initializes and renders pages"
FLOW_PAGES_TO_COMPONENTS = "Pages compose and render UI components"

# term -> (definition, when to use, pitfall)
PACKAGE_MANAGER_TERMS: Mapping[str, Tuple[str, str, str]] = MappingProxyType(
    {
        "npm": (
            "Node Package Manager - default package manager for Node.js projects",
            "Installing JavaScript dependencies and running package.json scripts",
            "Mixing npm with another manager produces conflicting lockfiles",
        ),
        "yarn": (
            "Fast, reliable package manager alternative to npm",
            "Projects that ship a yarn.lock file",
            "Running npm install in a yarn project ignores the yarn.lock pins",
        ),
        "pnpm": (
            "Performant npm - disk space efficient package manager",
            "Monorepos and projects that ship a pnpm-lock.yaml file",
            "Strict dependency isolation exposes undeclared transitive imports",
        ),
        "pip": (
            "Python package installer for managing Python libraries",
            "Installing the packages listed in requirements.txt",
            "Installing globally instead of inside a virtual environment",
        ),
        "poetry": (
            "Python dependency management and packaging tool",
            "Projects configured through pyproject.toml with a poetry.lock file",
            "Editing dependencies by hand without re-locking",
        ),
    }
)

CONCEPT_TERMS: Mapping[str, Tuple[str, str, str]] = MappingProxyType(
    {
        "SSR": (
            "Server-Side Rendering - rendering pages on the server before sending to client",
            "Pages that need fast first paint or search-engine indexing",
            "Accessing browser-only globals during server rendering",
        ),
        "REST API": (
            "Representational State Transfer - architectural style for web services",
            "Exposing resources over HTTP with predictable verbs and URLs",
            "Leaking internal data shapes directly into public responses",
        ),
        "GraphQL": (
            "Query language for APIs providing efficient data fetching",
            "Clients that need flexible, nested data in a single round trip",
            "Unbounded query depth causing expensive resolvers",
        ),
        "State Management": (
            "Managing and synchronizing application state across components",
            "Data shared by many components or persisted between views",
            "Putting every piece of local UI state into a global store",
        ),
        "Component-based UI": (
            "Building UIs from reusable, self-contained components",
            "Repeated interface elements that share behaviour and styling",
            "Components that grow too large to reuse or test",
        ),
        "Authentication": (
            "Verifying user identity and managing access control",
            "Any feature that depends on who the current user is",
            "Trusting client-side checks without server validation",
        ),
        "Middleware": (
            "Software layer that processes requests between client and server",
            "Cross-cutting concerns such as logging, auth or parsing",
            "Order-dependent middleware registered in the wrong sequence",
        ),
    }
)

# basename (lower-cased) -> description for the file walkthrough
WELL_KNOWN_FILES: Mapping[str, str] = MappingProxyType(
    {
        "readme.md": "Project documentation",
        "package.json": "Node.js dependencies and scripts",
        "package-lock.json": "npm dependency lockfile",
        "yarn.lock": "Yarn dependency lockfile",
        "pnpm-lock.yaml": "pnpm dependency lockfile",
        "tsconfig.json": "TypeScript compiler configuration",
        "vite.config.ts": "Vite build configuration",
        "vite.config.js": "Vite build configuration",
        "webpack.config.js": "Webpack build configuration",
        "next.config.js": "Next.js framework configuration",
        "requirements.txt": "Python dependencies",
        "pyproject.toml": "Python project configuration",
        "poetry.lock": "Poetry dependency lockfile",
        "pipfile": "Pipenv dependency manifest",
        "setup.py": "Python packaging script",
        "go.mod": "Go module definition",
        "cargo.toml": "Rust crate manifest",
        "pom.xml": "Maven build configuration",
        "dockerfile": "Container image definition",
        "docker-compose.yml": "Multi-container service definition",
        ".env.example": "Example environment variables",
    }
)

ENTRY_POINT_DESCRIPTION = "Application entry point"
KEY_FILE_DESCRIPTION = "Key source file"
MAX_IMPORTANT_FILES = 10

SUMMARY_FALLBACK = "Repository analysis completed."
SUMMARY_TECH_LIMIT = 5
SUMMARY_MODULE_LIMIT = 3
UNKNOWN_REPO_NAME = "unknown/repo"
