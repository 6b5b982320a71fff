import sys

from booky.main import main

sys.exit(main())
