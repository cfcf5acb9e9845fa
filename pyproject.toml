[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "redditchain"
version = "0.1.0"
description = "A message-board state module with users, subreddits and posts addressed by content hashes"
requires-python = ">=3.10"
dependencies = []
keywords = ["message-board", "forum", "state-machine", "subreddit", "content-addressing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: Message Boards",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["redditchain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
