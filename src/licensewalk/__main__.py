import sys

from licensewalk.cli.main import main

sys.exit(main())
