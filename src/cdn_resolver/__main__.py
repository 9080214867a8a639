"""Allow ``python -m cdn_resolver``."""

from .cli import main

main()
