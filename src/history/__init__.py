"""Versioned file access layer.

This module rewrites logical filenames into date-versioned physical paths.
It classifies file operations and falls back to older versions on demand.
"""
