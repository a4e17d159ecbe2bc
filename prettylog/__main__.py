"""`python -m prettylog` 用のエントリポイント。"""

import sys

from prettylog.cli import main

if __name__ == "__main__":
    sys.exit(main())
