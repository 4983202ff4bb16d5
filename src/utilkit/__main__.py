#!/usr/bin/env python3
"""
Entry point for running utilkit as a module
This allows running: python -m utilkit
"""

from utilkit.cli import app

if __name__ == "__main__":
    app()
