"""Shared utility functions."""
import logging
import os
from pathlib import Path


def get_project_root() -> Path:
    """Checkout directory holding the graphwalk package and the bundled graphs/"""
    return Path(__file__).resolve().parent.parent


def get_graphs_path(filename: str = None) -> Path:
    """
    Get path to the bundled graph definitions directory or a file in it.

    Args:
        filename: Optional graph definition filename

    Returns:
        Path to graphs directory or specific graph file
    """
    graphs_dir = get_project_root() / "graphs"
    if filename:
        return graphs_dir / filename
    return graphs_dir


def configure_logging(level: str = None) -> None:
    """Configure root logging for scripts."""
    logging.basicConfig(
        level=(level or Config.LOG_LEVEL).upper(),
        format="%(message)s",
    )


class Config:
    """Configuration constants."""

    # Logging
    LOG_LEVEL = os.getenv("GRAPHWALK_LOG_LEVEL", "WARNING")

    # Traversal
    DEFAULT_ORDER = os.getenv("GRAPHWALK_DEFAULT_ORDER", "bfs")

    # Graph definitions
    DEFAULT_WEIGHT = int(os.getenv("GRAPHWALK_DEFAULT_WEIGHT", "1"))
