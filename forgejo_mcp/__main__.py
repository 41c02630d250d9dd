"""Allow running as ``python -m forgejo_mcp``."""

from .main import main

main()
