import sys

from spheretrace.main import main

sys.exit(main())
