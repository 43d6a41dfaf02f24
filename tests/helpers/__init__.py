"""Test helper utilities for Material Search tests."""

from .scripted_recognizer import ScriptedRecognizer

__all__ = ["ScriptedRecognizer"]
