[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osalgos"
version = "0.1.0"
description = "Classic operating-systems algorithms: CPU scheduling, a bounded producer/consumer buffer and bubble sort"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduling",
    "fcfs",
    "sjf",
    "round-robin",
    "priority",
    "producer-consumer",
    "bubble-sort",
    "operating-systems",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osalgos-sort = "osalgos.sorting:main"
osalgos-fcfs = "osalgos.fcfs:main"
osalgos-sjf = "osalgos.sjf:main"
osalgos-priority = "osalgos.priority:main"
osalgos-round-robin = "osalgos.round_robin:main"
osalgos-buffer = "osalgos.buffer:main"

[tool.hatch.build.targets.wheel]
packages = ["osalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
