import sys

from sqlcmock.cli import main

sys.exit(main())
