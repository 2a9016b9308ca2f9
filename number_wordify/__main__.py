import sys

from number_wordify.cli import main

sys.exit(main())
