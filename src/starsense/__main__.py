"""Main entry point for StarSense."""

from starsense.cli import main

if __name__ == "__main__":
    main()
