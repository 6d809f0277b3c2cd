"""Allow ``python -m phpmake``."""

from phpmake.cli import main

main()
