"""
Report rendering package.
"""

from .markdown import render_markdown_report

__all__ = ["render_markdown_report"]
