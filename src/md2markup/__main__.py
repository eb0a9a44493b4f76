"""Run the md2markup command with ``python -m md2markup``.

Arguments are the same as for the ``md2markup`` console script, e.g.
``python -m md2markup notes.md --fragment``.
"""

import sys

from md2markup.cli import main

if __name__ == "__main__":
    sys.exit(main())
