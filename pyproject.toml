[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ostepdemos"
version = "0.1.0"
description = "Small runnable demonstrations of operating-system concepts: processes, lottery scheduling, threads, races, deadlock, condition variables, persistence and networking."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-systems",
    "education",
    "threads",
    "condition-variables",
    "scheduling",
    "concurrency",
    "udp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ostep-lottery = "ostepdemos.lottery:main"
ostep-pstack = "ostepdemos.pstack:main"
ostep-udp-client = "ostepdemos.client:main"
ostep-udp-server = "ostepdemos.server:main"
ostep-cpu-api = "ostepdemos.cpu_api:main"
ostep-intro = "ostepdemos.intro:main"
ostep-threads-api = "ostepdemos.threads_api:main"
ostep-threads-intro = "ostepdemos.threads_intro:main"
ostep-threads-bugs = "ostepdemos.threads_bugs:main"
ostep-pc = "ostepdemos.pc:main"

[tool.hatch.build.targets.wheel]
packages = ["ostepdemos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
