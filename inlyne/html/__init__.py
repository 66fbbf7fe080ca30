"""Helpers for HTML produced from Markdown: inline styles and pictures."""