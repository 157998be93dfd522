import sys

from magickscript.cli import main

sys.exit(main())
