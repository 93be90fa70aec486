"""Allow running the solver with `python -m wordchain`."""

from wordchain import main

main()
