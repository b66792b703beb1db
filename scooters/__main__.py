"""
The primary entry point to the application.
"""

from scooters.cli import main

if __name__ == '__main__':
    main()
