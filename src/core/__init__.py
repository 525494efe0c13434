"""Dungeon item core"""
__version__ = "0.1.0"
