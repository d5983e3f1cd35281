"""Run the server: ``python -m snippetbox``."""

from snippetbox.server import main

if __name__ == "__main__":
    main()
