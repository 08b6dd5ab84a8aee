import sys
from simplecraft.main import main

if __name__ == "__main__":
    sys.exit(main())
