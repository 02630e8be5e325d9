"""Command-line interface: python -m banachtarski"""
from banachtarski.main import main

if __name__ == "__main__":
    main()
