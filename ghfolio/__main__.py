"""Module entrypoint for `python -m ghfolio`.

It forwards to the same main() function as the console script.

Usage:
    ```bash
    python -m ghfolio octocat --format md
    ```
"""

from .cli import main

if __name__ == "__main__":
    main()
