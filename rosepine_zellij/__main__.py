"""
Run the installer with python -m rosepine_zellij.
"""

from rosepine_zellij.cli import main

if __name__ == "__main__":
    main()
