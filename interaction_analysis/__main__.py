import sys

from .html_scanner import main

sys.exit(main())
