"""Main module for eng_blogs.

This module allows the command line to be run as a Python module using:
python -m eng_blogs

It delegates to the CLI's main group.
"""

from eng_blogs.cli import main

if __name__ == "__main__":
    main()
