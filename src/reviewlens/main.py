"""Main entry point for ReviewLens."""

from reviewlens.cli import main

if __name__ == "__main__":
    main()
