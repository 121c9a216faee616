"""Allow ``python -m charsetkit``."""

from charsetkit.cli import main

main()
