"""Presentation layer - Textual UI shell around the suggestion session."""
