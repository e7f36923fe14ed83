"""Run with: python -m sunburstchart"""
from sunburstchart.cli import cli

if __name__ == "__main__":
    cli()
