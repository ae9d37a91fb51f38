"""Entry point: python -m revdeps"""

from revdeps.cli import main

main()
