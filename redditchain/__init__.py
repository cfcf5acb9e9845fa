"""In-memory message-board state module: users, subreddits and posts keyed by hashed addresses."""

__version__ = "0.1.0"