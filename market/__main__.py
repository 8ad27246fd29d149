import sys

from market.main import main


sys.exit(main())
