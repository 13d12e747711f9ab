"""
Content export refresh: wipe the local export and pull a fresh one.
"""

from .refresher import ContentStats, count_tree, delete_content_dir, refresh_content

__all__ = [
    "ContentStats",
    "count_tree",
    "delete_content_dir",
    "refresh_content",
]
