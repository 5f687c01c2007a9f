# bootstrap_users/__main__.py
import sys

from bootstrap_users.main import main

sys.exit(main())
