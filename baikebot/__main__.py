"""
Entry point for running baikebot as a module: python -m baikebot
"""

from baikebot.cli.commands import app

if __name__ == "__main__":
    app()
