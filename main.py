"""loggerfy CLI: emit and inspect structured JSON log records."""

import sys

from loggerfy.cli import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
