"""
Punto de entrada: python -m ifprops
"""

from ifprops.cli.app import main

if __name__ == "__main__":
    main()
