"""Allow `python -m gamify`."""

from .cli.main import main

main()
