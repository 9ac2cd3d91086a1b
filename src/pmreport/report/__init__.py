"""Presentation: timeline chart and Markdown report."""

from .chart import render_timeline
from .markdown import frame_to_markdown, render_markdown, summary_frame, write_report

__all__ = [
    "render_timeline",
    "render_markdown",
    "frame_to_markdown",
    "summary_frame",
    "write_report",
]
