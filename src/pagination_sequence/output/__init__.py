"""Shared output formatting for the CLI."""

from .format import format_response, render_cli
from .render import render_sequence, sequence_payload

__all__ = ["format_response", "render_cli", "render_sequence", "sequence_payload"]
