import sys

from eth_vanity.cli import main

if __name__ == "__main__":
    sys.exit(main())
