"""python -m pronunciation_coach 진입점."""

from .cli import main

main()
