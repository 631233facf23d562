"""Feedback message pools, one JSON file per locale."""
