[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinybox"
version = "0.1.0"
description = "A box of small Unix-style tools: yes, cat, wc, base64, hashing, random numbers and tiny network servers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "unix",
    "coreutils",
    "base64",
    "sha256",
    "fnv",
    "xorshift",
    "port-scanner",
    "x11",
    "multicall",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tiny-hello = "tinybox.hello:main"
tiny-yes = "tinybox.yes:main"
tiny-hash = "tinybox.fnv:main"
tiny-random = "tinybox.rng:main"
tiny-multicall = "tinybox.multicall:main"
tiny-alloc = "tinybox.bump:main"
tiny-cat = "tinybox.cat:main"
tiny-signal = "tinybox.sigwatch:main"
tiny-mmap = "tinybox.mapview:main"
tiny-server = "tinybox.server:main"
tiny-base64 = "tinybox.b64:main"
tiny-udp-echo = "tinybox.udpecho:main"
tiny-x11 = "tinybox.x11:main"
tiny-sha256 = "tinybox.sha256:main"
tiny-portscan = "tinybox.portscan:main"
tiny-wc = "tinybox.wc:main"

[tool.hatch.build.targets.wheel]
packages = ["tinybox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
