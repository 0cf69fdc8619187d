"""Command-line entry point: ``python -m rainwalk``."""
from rainwalk.main import main

if __name__ == "__main__":
    main()
