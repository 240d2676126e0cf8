"""
FILE: gamify/cli/__init__.py
PURPOSE: Typer command-line entry point
"""
