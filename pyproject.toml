[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reactorkit"
version = "1.0.0"
description = "Threading, logging, time and buffer primitives for building event-driven network services"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "threads", "thread-pool", "buffer", "timestamp", "log-rotation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reactorkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
