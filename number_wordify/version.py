"""
version.py — number-wordify
============================
Single source of truth for the package version.
Used by:
  - pyproject.toml (dynamic version)
  - the command-line --version flag
"""

APP_NAME = "number-wordify"
VERSION  = "1.0.0"
