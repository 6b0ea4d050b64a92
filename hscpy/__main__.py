import sys

from hscpy.cli import main

sys.exit(main())
