import sys

from insurance_stats.cli import main

if __name__ == "__main__":
    sys.exit(main())
