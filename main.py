import sys

from preset_kit.cli import main

if __name__ == "__main__":
    sys.exit(main())
