"""
FILE: gamify/core/__init__.py
PURPOSE: Core state model (collections, scoring, navigation) with no UI dependencies
"""
