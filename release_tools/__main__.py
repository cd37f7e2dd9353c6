"""Allow ``python -m release_tools``."""

from .cli import main

main()
