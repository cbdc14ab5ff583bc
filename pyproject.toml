[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ossim"
version = "0.1.0"
description = "Small simulators for classic operating-system algorithms: CPU scheduling, page replacement, disk scheduling, memory allocation, deadlock avoidance and semaphores."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "page replacement",
    "disk scheduling",
    "memory allocation",
    "bankers algorithm",
    "semaphore",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
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
ossim-cpu = "ossim.cpu_scheduling:main"
ossim-pages = "ossim.page_replacement:main"
ossim-disk = "ossim.disk_scheduling:main"
ossim-memory = "ossim.memory_allocation:main"
ossim-bankers = "ossim.bankers:main"
ossim-semaphore = "ossim.semaphore:main"

[tool.hatch.build.targets.wheel]
packages = ["ossim"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
