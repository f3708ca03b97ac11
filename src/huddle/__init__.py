"""Huddle - a Slack-style chat workspace for the terminal."""

__version__ = "0.1.0"
