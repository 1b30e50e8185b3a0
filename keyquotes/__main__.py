import sys

from keyquotes.cli import main

sys.exit(main())
