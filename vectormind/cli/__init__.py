"""Command-line interface for vectormind"""
from .main import main

__all__ = ["main"]
